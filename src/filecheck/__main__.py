from filecheck.cli.main import app

app(prog_name="filecheck")
