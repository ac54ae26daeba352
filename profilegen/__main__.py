from profilegen.cli import app

app(prog_name="profilegen")
