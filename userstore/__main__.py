from userstore.cli import run

run()
