#!/usr/bin/env python3
"""
pricepixel - Tibber prices on an AWTRIX pixel clock
Launcher script, equivalent to the ``pricepixel`` console command.
"""

from pricepixel.cli import app


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
