"""
repoviz CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import context, deps, export, path, stats, tree


@click.group()
@click.version_option(package_name="repoviz")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """repoviz: Explore a repository as an interactive graph.

    \b
    SOURCE may be a local directory, a saved descriptor listing
    (JSON), or a GitHub URL.

    \b
    Quick Start:
      repoviz tree .
      repoviz tree . -e src/components -H src/components/Button.jsx
      repoviz deps . src/App.jsx
      repoviz export https://github.com/owner/repo -o graph.json
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(message)s",
        datefmt="[%X]",
    )


# Register commands
main.add_command(tree.tree)
main.add_command(path.path)
main.add_command(deps.deps)
main.add_command(stats.stats)
main.add_command(export.export)
main.add_command(context.context)

if __name__ == "__main__":
    main()
