"""HTTP layer: dependencies, error translation and versioned routers."""
