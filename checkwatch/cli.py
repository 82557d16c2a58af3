import typer

from .invocation import build_invocation
from .runner import run
from .utils import configure_logging


app = typer.Typer(add_completion=False)


@app.command()
def main() -> None:
    """Re-run `cargo check` (tests, then lib) and a rustfmt diff on every change.

    - Sets RUST_BACKTRACE=1 for everything cargo spawns.
    - Changes under tests/tmp/ are ignored and the screen is cleared between runs.
    - Exits with cargo-watch's own exit code.

    Log verbosity comes from CHECKWATCH_LOGLEVEL (default INFO).
    """
    configure_logging()
    code = run(build_invocation())
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
