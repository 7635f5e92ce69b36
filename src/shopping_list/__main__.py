"""Main entry point for shopping_list package."""

from shopping_list.cli.commands import main

if __name__ == '__main__':
    main()
