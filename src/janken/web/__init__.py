"""Web application serving the janken page."""
