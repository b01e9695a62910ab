"""Command line interface (`termux-py`), built with Typer and Rich."""
