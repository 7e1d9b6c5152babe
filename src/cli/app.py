"""Main CLI application using Typer."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from src.cli import __version__
from src.cli.logging_config import configure_logging, load_logging_options_from_env
from src.core.domain.protocol_params import InvalidPublicParameters, ProtocolConfig
from src.core.math.bigint_safeguards import DEFAULT_BIT_SIZE
from src.core.math.random_source import make_source
from src.zkp.keygen import generate_impostor_secret, generate_parameters
from src.zkp.round_executor import (
    ProverRole,
    neutrosophic_one_round_zkp_protocol,
    run_trials,
)

app = typer.Typer(
    name="nzkp",
    help="Neutrosophic 1-Round ZKP - proof of knowledge over a + bI numbers (I^2 = I)",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

EXIT_INVALID_PARAMETERS = 1
EXIT_UNEXPECTED_OUTCOME = 2


def _setup(verbose: bool) -> None:
    configure_logging(load_logging_options_from_env(verbose=verbose))


def _generate_or_exit(config: ProtocolConfig, source):
    try:
        return generate_parameters(source, config.bit_size)
    except InvalidPublicParameters as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=EXIT_INVALID_PARAMETERS)


@app.command()
def version():
    """Show nzkp version."""
    console.print(f"nzkp version {__version__}")


@app.command()
def demo(
    bits: int = typer.Option(
        DEFAULT_BIT_SIZE, "--bits", "-b", min=1, envvar="NZKP_BIT_SIZE",
        help="Bit size of p, g, x and the challenge y",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", "-s", envvar="NZKP_SEED",
        help="Seed for the random source (reproducible runs)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Run the protocol once with the real secret and once with a fake one."""
    _setup(verbose)
    config = ProtocolConfig(bit_size=bits, seed=seed)
    source = make_source(config.seed)
    digits = config.display_digits

    console.print(
        f"Starting the Neutrosophic 1-Round ZKP protocol test "
        f"with {config.bit_size}-bit numbers..."
    )

    params, x_secret = _generate_or_exit(config, source)

    console.print(f"\nProtocol Parameters ({config.bit_size} bits, truncated for display):")
    console.print(f"  g (generator): {params.g.truncated(digits)}")
    console.print(f"  p (modulus):   {params.p.truncated(digits)}")
    console.print(f"  b (g^x mod p): {params.b.truncated(digits)}")
    console.print(f"  x (Peggy's secret): {x_secret.truncated(digits)}")

    console.print("\n[bold]--- Test 1: Peggy KNOWS the secret key 'x' ---[/bold]")
    honest_ok = neutrosophic_one_round_zkp_protocol(
        params.g, params.p, params.b, x_secret, source, config.bit_size
    )
    if honest_ok:
        console.print(
            "[green]Verification SUCCESSFUL![/green] "
            "Peggy proved knowledge of 'x' without revealing it."
        )
    else:
        console.print(
            "[red]Verification FAILED![/red] An error occurred in the protocol logic."
        )

    console.print("\n[bold]--- Test 2: Peggy does NOT KNOW the secret key 'x' ---[/bold]")
    x_fake = generate_impostor_secret(source, config.bit_size)
    console.print(f"  Fake x (from Peggy): {x_fake.truncated(digits)}")
    impostor_ok = neutrosophic_one_round_zkp_protocol(
        params.g, params.p, params.b, x_fake, source, config.bit_size
    )
    if impostor_ok:
        console.print(
            "[red]Verification SUCCEEDED (INCORRECT)![/red] "
            "Peggy should not have passed without the secret."
        )
    else:
        console.print(
            "[green]Verification FAILED (CORRECT)![/green] "
            "Peggy could not prove knowledge of 'x'."
        )

    expected = ProverRole.HONEST.outcome_as_expected(
        honest_ok
    ) and ProverRole.IMPOSTOR.outcome_as_expected(impostor_ok)
    if not expected:
        raise typer.Exit(code=EXIT_UNEXPECTED_OUTCOME)


@app.command()
def trials(
    bits: int = typer.Option(
        DEFAULT_BIT_SIZE, "--bits", "-b", min=1, envvar="NZKP_BIT_SIZE",
        help="Bit size of p, g, x and the challenge y",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", "-s", envvar="NZKP_SEED",
        help="Seed for the random source (reproducible runs)",
    ),
    count: int = typer.Option(
        ProtocolConfig().trials, "--count", "-n", min=1, help="Rounds per prover role"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Run repeated independent rounds for an honest and an impostor prover."""
    _setup(verbose)
    config = ProtocolConfig(bit_size=bits, seed=seed, trials=count)
    source = make_source(config.seed)

    params, x_secret = _generate_or_exit(config, source)

    table = Table(
        title=f"N-1-R ZKP trials ({config.bit_size} bits)",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Prover", style="white")
    table.add_column("Rounds", justify="right")
    table.add_column("Verified", justify="right")
    table.add_column("Rejected", justify="right")
    table.add_column("Expected", justify="center")

    all_expected = True
    for role in ProverRole:
        if role is ProverRole.HONEST:
            secret = x_secret
        else:
            secret = generate_impostor_secret(source, config.bit_size)
        summary = run_trials(params, secret, source, config.trials)

        expected = role.summary_as_expected(summary)
        all_expected = all_expected and expected
        mark = "[green]✓[/green]" if expected else "[red]✗[/red]"
        table.add_row(
            role.value,
            str(summary.trials),
            str(summary.successes),
            str(summary.failures),
            mark,
        )

    console.print(table)

    if not all_expected:
        raise typer.Exit(code=EXIT_UNEXPECTED_OUTCOME)
