"""ghmodels ask -- quick question to a model on GitHub Models."""

from __future__ import annotations

import click

from ghmodels.cli.formatting import (
    format_error,
    format_failure_details,
    format_reply,
    get_console,
)
from ghmodels.formatting import print_rate_limit_notice
from ghmodels.llm.client import ModelsClient, create_basic_client
from ghmodels.llm.errors import LLMClientError
from ghmodels.llm.probe import NOT_FOUND_HINT, validate_credential
from ghmodels.settings import DEFAULT_MODEL

DEFAULT_QUESTION = "Just say: working!"


@click.command()
@click.argument("question", nargs=-1)
@click.option("--model", default=DEFAULT_MODEL, show_default=True, help="Model to ask.")
@click.option("--max-tokens", default=100, show_default=True, type=int)
def ask(question: tuple[str, ...], model: str, max_tokens: int) -> None:
    """Ask QUESTION (prompted for if omitted) and print the answer."""
    console = get_console()
    console.print(f"Quick test with GitHub Models ({model})\n")

    text = " ".join(question).strip()
    if not text:
        text = click.prompt(
            "Question for the model", default="", show_default=False
        ).strip() or DEFAULT_QUESTION
    console.print(f"Question: {text}\n", highlight=False)

    if not validate_credential():
        console.print("[red]Invalid token or connection problem[/red]")
        raise SystemExit(1)

    try:
        with create_basic_client(model) as client:
            response = client.chat(
                [{"role": "user", "content": text}],
                model=model,
                max_tokens=max_tokens,
            )
        format_reply(ModelsClient.extract_content(response), console)
    except Exception as e:
        format_error(str(e), console)
        if isinstance(e, LLMClientError):
            format_failure_details(
                console,
                status_code=e.status_code,
                detail=e.body,
                hint=NOT_FOUND_HINT if e.status_code == 404 else None,
            )
        console.print("See the GitHub Models preview access instructions.")
        raise SystemExit(1) from None

    print_rate_limit_notice(console)
