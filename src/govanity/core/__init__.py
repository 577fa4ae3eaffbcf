"""Path matching, tag rendering and documentation redirects."""
