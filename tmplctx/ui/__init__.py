"""Console output for the tmplctx CLI."""
