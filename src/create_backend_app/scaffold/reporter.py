"""Progress reporting for the scaffold engine."""

import click


class ScaffoldReporter:
    """Writes scaffold progress to the terminal with click.echo."""

    def using_current_directory(self, target):
        click.echo(f"Using current directory: {target}")

    def reusing_directory(self, name):
        click.echo(f"Folder {name} already exists. Skipping creation...")

    def creating_directory(self, name):
        click.echo(f'Creating folder "{name}"...')

    def copying_started(self):
        click.echo("Copying template files...")

    def copied(self, relative_path):
        click.echo(f"  Copying: {relative_path}")

    def copy_finished(self):
        click.echo("Template files copied successfully!")

    def error(self, message):
        click.echo(f"Error: {message}", err=True)

    def completed(self, text):
        click.echo(text)
