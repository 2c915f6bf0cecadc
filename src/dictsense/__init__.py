"""dictsense — dotted-path navigation and format-preserving editing of dictionary.json."""
