"""Main entry point for the decaesar package."""
from decaesar.cli import cli


def main():
    """Main entry point function."""
    cli()


if __name__ == "__main__":
    main()
