"""Planning board layout backend for apparel production lines."""
