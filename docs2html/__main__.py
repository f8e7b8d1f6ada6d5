from docs2html.cli import app

app()
