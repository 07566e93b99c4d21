from string import ascii_lowercase

class InvalidKey(ValueError):
    def __init__(self, message="Vigenère key must contain only letters."):
        super().__init__(message)

def caesar_encrypt(text, shift):
    shift = shift % len(ascii_lowercase)
    # letters outside the table are left untouched by str.translate
    table = str.maketrans(ascii_lowercase, ascii_lowercase[shift:] + ascii_lowercase[:shift])
    return text.lower().translate(table)

def caesar_decrypt(text, shift):
    return caesar_encrypt(text, -shift)

def validate_key(key):
    if not isinstance(key, str) or not key or any(k not in ascii_lowercase for k in key.lower()):
        raise InvalidKey()

def _vigenere(text, key, transform):
    validate_key(key)
    key = key.lower()
    output = []
    position = 0
    for char in text.lower():
        if char in ascii_lowercase:
            shift = ascii_lowercase.index(key[position % len(key)])
            output.append(transform(char, shift))
            position += 1
        else:
            # non-letters do not consume key material
            output.append(char)
    return "".join(output)

def vigenere_encrypt(text, key):
    return _vigenere(text, key, caesar_encrypt)

def vigenere_decrypt(text, key):
    return _vigenere(text, key, caesar_decrypt)
