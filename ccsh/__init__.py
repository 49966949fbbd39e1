"""ccsh - a small interactive shell with pipes and a few built-ins."""
