"""
Command-line entry point for generating lorem ipsum text.

Trains a Markov chain on the built-in corpus (or on a file given with
--corpus) and prints words, sentences, paragraphs or a title.
"""
import logging
import random
import sys

import click

from . import config
from .corpus import build_default_model
from .errors import LipsumError
from .markov_chain import (
    build_model,
    generate_paragraphs,
    generate_sentences,
    generate_title,
    generate_words,
)


@click.command()
@click.option('--words', '-w', 'word_count', type=click.IntRange(min=0),
              help=f"Number of words to generate (the default mode, {config.DEFAULT_WORD_COUNT} words).")
@click.option('--sentences', '-s', 'sentence_count', type=click.IntRange(min=0),
              help="Number of sentences to generate.")
@click.option('--paragraphs', '-p', 'paragraph_count', type=click.IntRange(min=0),
              help="Number of paragraphs to generate.")
@click.option('--title', '-t', is_flag=True, help="Generate a short title.")
@click.option('--corpus', '-c', 'corpus_file', type=click.File('r', encoding='utf-8'),
              help="Training text to learn from. Use '-' for stdin. Defaults to the built-in lorem ipsum text.")
@click.option('--order', '-n', type=int, default=config.DEFAULT_ORDER, show_default=True,
              help="Number of words used to predict the next one.")
@click.option('--seed', type=int, help="Seed for the random number generator.")
@click.option('--progress', is_flag=True, help="Show a progress bar while learning.")
@click.option('--verbose', '-v', is_flag=True, help="Enable debug logging.")
def main(word_count, sentence_count, paragraph_count, title, corpus_file, order, seed, progress, verbose):
    """
    Generates pseudo-random filler text from a Markov chain.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else config.LOG_LEVEL, format=config.LOG_FORMAT)

    modes = [m for m in (word_count, sentence_count, paragraph_count) if m is not None]
    if len(modes) + int(title) > 1:
        raise click.UsageError("Choose only one of --words, --sentences, --paragraphs and --title.")

    rng = random.Random(seed)

    try:
        if corpus_file is not None:
            logging.info(f"Reading corpus from {corpus_file.name}")
            model = build_model(corpus_file.read(), order, progress=progress)
        else:
            model = build_default_model(order, progress=progress)

        if title:
            text = generate_title(model, rng)
        elif sentence_count is not None:
            text = generate_sentences(model, rng, sentence_count)
        elif paragraph_count is not None:
            text = generate_paragraphs(model, rng, paragraph_count)
        else:
            count = config.DEFAULT_WORD_COUNT if word_count is None else word_count
            text = generate_words(model, rng, count)
    except LipsumError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
    except UnicodeDecodeError as e:
        click.secho(f"Error reading corpus: {e}", fg='red', err=True)
        sys.exit(1)

    click.echo(text)


if __name__ == '__main__':
    main()
