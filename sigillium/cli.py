"""
sigillium.cli
=============

`sigillium`: prove possession of a ceremony recovery phrase by signing a
challenge, without ever writing the derived key to disk.

Examples
--------
    $ sigillium pubkey                        # prompts for the phrase
    $ sigillium sign "challenge text"
    $ SIGILLIUM_PHRASE="..." sigillium pubkey
    $ sigillium verify --public-key <hex> --signature <hex> "challenge text"
    $ sigillium interactive                   # ceremony menu loop
    $ sigillium new-phrase --words 12         # rehearsal phrase

Exit status is 0 on success. Errors print ``error: <Kind>: <detail>`` to
stderr and exit with 3 (InvalidMnemonic), 4 (MalformedInput) or
5 (VerificationFailed).
"""

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

import click
import typer

from .config import Settings
from .errors import InvalidMnemonic, SigilliumError
from .generate import rehearsal_keypair
from .log import configure_logging
from .session import Session
from .signing import verify_hex
from .sources import (
    PhraseSource,
    PromptMessageSource,
    PromptPhraseSource,
    SuppliedMessageSource,
    SuppliedPhraseSource,
)
from .version import __version__

log = logging.getLogger(__name__)

app = typer.Typer(
    name="sigillium",
    help="Derive the ceremony key from a recovery phrase and sign or verify challenges.",
    no_args_is_help=True,
    add_completion=False,
)

__all__ = ["app", "main"]

OPTION_SHOW_PUBKEY = "Show Pubkey"
OPTION_SIGN_MSG = "Sign Message"
OPTION_VERIFY_MSG = "Verify Signature"
OPTION_QUIT = "Quit"
MENU_OPTIONS = (OPTION_SHOW_PUBKEY, OPTION_SIGN_MSG, OPTION_VERIFY_MSG, OPTION_QUIT)


@dataclass
class Ctx:
    settings: Settings
    phrase: Optional[str]

    def phrase_source(self) -> PhraseSource:
        if self.phrase is not None:
            source = SuppliedPhraseSource(self.phrase)
            self.phrase = None
            return source
        return PromptPhraseSource(self.settings.mnemonic_prompt)

    def open_session(self) -> Session:
        supplied = self.phrase is not None
        source = self.phrase_source()
        # A supplied phrase is never retried; a typed one can be re-entered.
        attempts = 1 if supplied else self.settings.phrase_attempts
        return Session.open(source, attempts=attempts, on_rejected=_report_rejection)


def _report_rejection(exc: InvalidMnemonic) -> None:
    typer.echo(f"error: {exc}. Please try again.", err=True)


@contextmanager
def _reporting() -> Iterator[None]:
    """Turn a SigilliumError into a message on stderr and its exit code."""
    try:
        yield
    except SigilliumError as exc:
        log.debug("command failed with %s", exc.kind)
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(exc.exit_code) from None


@app.callback()
def _root(
    ctx: typer.Context,
    phrase: Optional[str] = typer.Option(
        None,
        "--phrase",
        help="Recovery phrase (prefer the environment variable or the prompt).",
        envvar="SIGILLIUM_PHRASE",
        show_envvar=True,
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    try:
        settings = Settings.from_env().with_overrides(log_level=log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    configure_logging(settings.log_level)
    ctx.obj = Ctx(settings=settings, phrase=phrase)


@app.command("version")
def version() -> None:
    """Print the sigillium version."""
    typer.echo(f"sigillium {__version__}")


@app.command("pubkey")
def pubkey(ctx: typer.Context) -> None:
    """Derive the key and print its public half."""
    with _reporting(), ctx.obj.open_session() as session:
        typer.echo(f"Public Key: {session.public_key_hex()}")


@app.command("sign")
def sign(
    ctx: typer.Context,
    message: Optional[str] = typer.Argument(
        None, help="Challenge to sign. Prompted for when omitted."
    ),
) -> None:
    """Derive the key and sign a challenge message."""
    c: Ctx = ctx.obj
    with _reporting(), c.open_session() as session:
        if message is None:
            message = PromptMessageSource(c.settings.sign_prompt).read_message()
        else:
            message = SuppliedMessageSource(message).read_message()
        typer.echo(f"Signature: {session.sign_message(message)}")


@app.command("verify")
def verify(
    ctx: typer.Context,
    public_key: str = typer.Option(..., "--public-key", "-k", help="Public key (hex)."),
    signature: str = typer.Option(..., "--signature", "-s", help="Signature (hex)."),
    message: Optional[str] = typer.Argument(
        None, help="Message that was signed. Prompted for when omitted."
    ),
) -> None:
    """Check a signature. Needs no recovery phrase."""
    c: Ctx = ctx.obj
    if message is None:
        message = PromptMessageSource(c.settings.verify_prompts["message"]).read_message()
    with _reporting():
        verify_hex(public_key, message, signature)
    typer.echo("Signature is valid.")


@app.command("interactive")
def interactive(ctx: typer.Context) -> None:
    """Menu loop on a single session: show key, sign, verify, quit."""
    c: Ctx = ctx.obj
    with _reporting(), c.open_session() as session:
        typer.echo()
        while True:
            choice = typer.prompt(
                c.settings.menu_prompt,
                type=click.Choice(MENU_OPTIONS),
                show_choices=True,
            )
            if choice == OPTION_QUIT:
                return
            try:
                _run_menu_option(c.settings, session, choice)
            except SigilliumError as exc:
                # Errors end the attempt, not the session
                typer.echo(f"error: {exc}", err=True)
            typer.echo()


def _run_menu_option(settings: Settings, session: Session, choice: str) -> None:
    if choice == OPTION_SHOW_PUBKEY:
        typer.echo(f"Public Key: {session.public_key_hex()}")
    elif choice == OPTION_SIGN_MSG:
        message = PromptMessageSource(settings.sign_prompt).read_message()
        typer.echo()
        typer.echo(f"Signature: {session.sign_message(message)}")
    elif choice == OPTION_VERIFY_MSG:
        prompts = settings.verify_prompts
        public_key = typer.prompt(prompts["public_key"], default=session.public_key_hex())
        signature = typer.prompt(prompts["signature"])
        message = PromptMessageSource(prompts["message"]).read_message()
        session.verify_message(public_key, message, signature)
        typer.echo("Signature is valid.")


@app.command("new-phrase")
def new_phrase(
    words: int = typer.Option(24, "--words", "-w", help="Phrase length: 12, 15, 18, 21 or 24."),
) -> None:
    """Generate a rehearsal phrase and show its public key. For testing only."""
    try:
        phrase, keypair = rehearsal_keypair(words)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--words") from exc
    with keypair:
        typer.echo(f"mnemonic: {phrase}")
        typer.echo(f"Public Key: {keypair.public_key_hex}")


def main(argv: Optional[list] = None) -> int:
    """Run the CLI and return its exit code."""
    try:
        rv = app(prog_name="sigillium", standalone_mode=False, args=argv)
    except click.exceptions.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    except click.ClickException as e:
        e.show()
        return e.exit_code
    # click hands back the exit code of a typer.Exit when not standalone
    return rv if isinstance(rv, int) else 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
