# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Main entry point for the pip-sbom CLI tool

import typer

from pip_sbom.cli.list_modules_command import list_modules

app = typer.Typer(add_completion=False)
app.command()(list_modules)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        ctx.exit(2)


if __name__ == "__main__":
    app()
