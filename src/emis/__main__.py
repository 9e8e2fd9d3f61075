from emis.cli import app

app(prog_name="emis")
