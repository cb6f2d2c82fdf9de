"""End-to-end tests: the application driven through its outer surfaces."""
