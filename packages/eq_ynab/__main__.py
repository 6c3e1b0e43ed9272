from .cli import app

app(prog_name="eq-ynab")
