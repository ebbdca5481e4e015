import click

from easyphrase import __version__
from easyphrase.case import case_names
from easyphrase.wordlists import list_names


class _MutuallyExclusiveOption(click.Option):
    """Click option that is mutually exclusive with another option."""

    def __init__(self, *args, **kwargs):
        self.mutually_exclusive = set(kwargs.pop("mutually_exclusive", []))
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        for name in self.mutually_exclusive:
            if name in opts and self.name in opts:
                other = next(p for p in ctx.command.params if p.name == name)
                raise click.UsageError(
                    f"{self.opts[0]} and {other.opts[0]} are mutually exclusive."
                )
        return super().handle_parse_result(ctx, opts, args)


def _build_config(preset, overrides):
    """Resolve preset + CLI overrides into a PassphraseConfig. Raises PassphraseError."""
    from easyphrase.config import PassphraseConfig, load_preset, merge_config

    base = load_preset(preset) if preset else {}
    # An explicit --list or --wordfile replaces whichever source the preset names.
    if overrides.get("wordlist") is not None or overrides.get("wordfile") is not None:
        base = {k: v for k, v in base.items() if k not in ("wordlist", "wordfile")}
    return PassphraseConfig.from_mapping(merge_config(base, overrides))


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--case", "-c", type=click.Choice(case_names(), case_sensitive=False), default=None, help="Case to use on the words. [default: lower]")
@click.option("--list", "-l", "wordlist", type=click.Choice(list_names()), default=None, help="Built-in word list. [default: long]", cls=_MutuallyExclusiveOption, mutually_exclusive=["wordfile"])
@click.option("--wordfile", "-w", default=None, type=click.Path(dir_okay=False), help="Custom word list file, one word per line.", cls=_MutuallyExclusiveOption, mutually_exclusive=["wordlist"])
@click.option("--number", "-n", default=None, type=int, help="Number of words in the passphrase. [default: 6]")
@click.option("--separator", "-s", default=None, help="Separator between words. [default: ' ']")
@click.option("--count", "-k", default=1, type=click.IntRange(min=1), help="Number of passphrases to generate.")
@click.option("--preset", default=None, help="Load settings from a named preset (e.g. compact, strong).")
@click.option("--entropy", "show_entropy", is_flag=True, default=False, help="Print the estimated strength in bits to stderr.")
@click.option("--list-lists", is_flag=True, default=False, help="Show the built-in word lists and exit.")
@click.option("--list-presets", is_flag=True, default=False, help="Show the available presets and exit.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug output.", cls=_MutuallyExclusiveOption, mutually_exclusive=["quiet"])
@click.option("--quiet", "-q", is_flag=True, default=False, help="Suppress all output except the passphrase and errors.", cls=_MutuallyExclusiveOption, mutually_exclusive=["verbose"])
@click.option("--log-file", default=None, type=click.Path(), help="Write log entries to file.")
@click.version_option(__version__, "--version", "-V", prog_name="easyphrase")
def cli(case, wordlist, wordfile, number, separator, count, preset, show_entropy, list_lists, list_presets, verbose, quiet, log_file):
    """Generate passwords that are easy to remember.

    Words are drawn uniformly at random, with replacement, from one of the
    EFF word lists or from your own file. Inspired by https://xkcd.com/936/
    """
    from easyphrase.errors import PassphraseError
    from easyphrase.logging_config import setup_logging
    from easyphrase.passphrase import entropy_bits, generate_passphrase
    from easyphrase.random_source import default_rng
    from easyphrase.ui import Console
    from easyphrase.wordlists import load_builtin, load_wordlist

    console = Console(quiet=quiet, verbose=verbose)
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    if list_lists:
        for name in list_names():
            click.echo(f"{name}\t{len(load_builtin(name))} words")
        return

    if list_presets:
        from easyphrase.config import list_presets as _list_presets

        for name in _list_presets():
            click.echo(name)
        return

    overrides = {
        "case": case,
        "wordlist": wordlist,
        "wordfile": wordfile,
        "number": number,
        "separator": separator,
    }
    try:
        config = _build_config(preset, overrides)
        words = load_wordlist(config.wordlist, config.wordfile)
        rng = default_rng()
        phrases = [generate_passphrase(config, rng=rng, words=words) for _ in range(count)]
    except PassphraseError as e:
        logger.debug("Generation failed: %s", e)
        raise click.ClickException(str(e))

    source = config.wordfile or config.wordlist
    console.settings(source, len(words), config.case.value, config.number)
    bits = entropy_bits(len(words), config.number, config.case)
    logger.info("Generated %d passphrase(s) from '%s' (%.1f bits each)", count, source, bits)
    if show_entropy:
        console.entropy(bits, config.number, len(words))

    for phrase in phrases:
        click.echo(phrase)


if __name__ == "__main__":
    cli()
