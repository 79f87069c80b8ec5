# sassimport/main.py
"""Main entry point for the sassimport CLI application."""
from sassimport.cli.interface import main_cli

def entrypoint():
    """Function to be called by the script defined in pyproject.toml."""
    main_cli(prog_name="sassimport")

if __name__ == '__main__':
    entrypoint()
