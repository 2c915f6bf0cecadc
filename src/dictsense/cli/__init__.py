"""dictsense command-line interface."""
