import click

from ballotbox.services.identity import issue_identity_token


def register_commands(app):
    @app.cli.command("issue-token")
    @click.argument("identity")
    def issue_token(identity):
        """Print a bearer token authenticating IDENTITY."""
        click.echo(issue_identity_token(identity))
