from token_guard.cli import app

app()
