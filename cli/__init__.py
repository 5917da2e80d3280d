"""ProcessArchitec command line interface."""
