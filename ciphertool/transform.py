from . utils.crypt import caesar_encrypt, caesar_decrypt, vigenere_encrypt, vigenere_decrypt
import logging

logger = logging.getLogger("ciphertool")

CIPHERS = {
    'caesar': {'encrypt': caesar_encrypt, 'decrypt': caesar_decrypt},
    'vigenere': {'encrypt': vigenere_encrypt, 'decrypt': vigenere_decrypt},
}

MODES = ('encrypt', 'decrypt')

class Transform:
    """
    This class is responsible of applying the selected cipher, in the selected
    mode, to a piece of text. The caesar cipher uses the shift, while the
    vigenere cipher uses the key.
    """
    def __init__(self, cipher='caesar', mode='encrypt', shift=3, key='key'):
        if cipher not in CIPHERS:
            raise ValueError(f'cipher value should be one of {", ".join(CIPHERS)}, got "{cipher}"')
        if mode not in MODES:
            raise ValueError(f'mode value should be either "encrypt" or "decrypt", got "{mode}"')
        self.cipher = cipher
        self.mode = mode
        self.shift = shift
        self.key = key

    def process(self, text):
        logger.debug(f'Applying {self.cipher} {self.mode} to {len(text)} characters')
        function = CIPHERS[self.cipher][self.mode]
        if self.cipher == 'caesar':
            return function(text, self.shift)
        return function(text, self.key)
