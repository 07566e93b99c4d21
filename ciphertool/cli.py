#!/usr/bin/env python3

import click
import click_log
import logging
import sys
import yaml
from ciphertool import Transform, InvalidKey, __version__
from .transform import CIPHERS, MODES

logger = logging.getLogger("ciphertool")
click_log.basic_config(logger)

DEFAULTS = {
    'cipher': 'caesar',
    'mode': 'encrypt',
    'shift': 3,
    'key': 'key',
}

def load_config(ctx, param, value):
    '''
    Reads the YAML configuration file, whose entries replace the built-in defaults.
    '''
    config = dict(DEFAULTS)
    if value is None:
        return config
    with open(value, 'r') as f:
        try:
            loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise click.BadParameter(f'Could not parse YAML file "{value}": {e}', ctx=ctx, param=param)
    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise click.BadParameter(f'The configuration in "{value}" should be a mapping', ctx=ctx, param=param)
    config.update({k: v for k, v in loaded.items() if k in DEFAULTS})
    if config['cipher'] not in CIPHERS:
        raise click.BadParameter(f'Unknown cipher "{config["cipher"]}" in "{value}"', ctx=ctx, param=param)
    if config['mode'] not in MODES:
        raise click.BadParameter(f'Unknown mode "{config["mode"]}" in "{value}"', ctx=ctx, param=param)
    try:
        config['shift'] = int(config['shift'])
    except (TypeError, ValueError):
        raise click.BadParameter(f'The shift in "{value}" should be an integer', ctx=ctx, param=param)
    # an empty `key:` entry is kept empty, so that the vigenere cipher rejects it
    config['key'] = str(config['key']) if config['key'] is not None else ''
    return config

@click.command()
@click.version_option(version=__version__)
@click.option('--debug/--no-debug', default=False)
@click.argument('text', required=False)
@click.option('--cipher', '-c', type=click.Choice(list(CIPHERS)), default=None,
    help='The cipher to apply [default: caesar]')
@click.option('--mode', '-m', type=click.Choice(MODES), default=None,
    help='Whether to encrypt or decrypt the text [default: encrypt]')
@click.option('--shift', '-s', type=int, default=None, help='Shift of the caesar cipher [default: 3]')
@click.option('--key', '-k', type=str, default=None, help='Key of the vigenere cipher [default: key]')
@click.option('--config', type=click.Path(exists=True, dir_okay=False, resolve_path=True), required=False,
    callback=load_config, help='YAML file with the default cipher, mode, shift and key')
def cli(debug, text, cipher, mode, shift, key, config):
    """
    Encrypts or decrypts TEXT with the caesar or the vigenere cipher.
    If TEXT is omitted or is -, it is read from the standard input.
    """
    if not debug:
        logger.setLevel(logging.ERROR)
    else:
        logger.setLevel(logging.DEBUG)

    if text is None or text == '-':
        text = click.get_text_stream('stdin').read()
        if text.endswith('\n'):
            text = text[:-1]

    cipher = cipher if cipher is not None else config['cipher']
    mode = mode if mode is not None else config['mode']
    shift = shift if shift is not None else config['shift']
    key = key if key is not None else config['key']
    logger.debug(f'Using cipher {cipher}, mode {mode}')

    try:
        result = Transform(cipher, mode, shift=shift, key=key).process(text)
    except InvalidKey as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
    click.echo(result)
