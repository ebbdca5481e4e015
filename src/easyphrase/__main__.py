from easyphrase.cli import cli

cli(prog_name="easyphrase")
