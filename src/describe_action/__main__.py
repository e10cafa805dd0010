from describe_action.cli import cli

cli()
