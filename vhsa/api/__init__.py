"""HTTP API for the VHSA screening program."""
