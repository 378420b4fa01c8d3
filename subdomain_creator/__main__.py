"""
Main entry point for running the package directly.

Starts the web API with:
    python -m subdomain_creator
"""

from subdomain_creator.web_ui import main

if __name__ == "__main__":
    main()
