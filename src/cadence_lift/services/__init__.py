"""Application services shared by the CLI and the web API."""
