"""
Base62 encoding of identifiers into aliases.

Symbol order is digits, then uppercase, then lowercase, so the alias of
an identifier below 62 is a single character and 62 becomes "10".
"""

import string

from pitico_app.exceptions import InvalidAlias


class Base62Encoder:
    """
    Converts a non-negative integer identifier to its alias and back.
    
    Pure and deterministic: the alias stored with a record is always
    encode(record.id).
    """
    
    BASE62_CHARS = string.digits + string.ascii_uppercase + string.ascii_lowercase
    BASE = len(BASE62_CHARS)
    
    def __init__(self):
        self._index = {char: value for value, char in enumerate(self.BASE62_CHARS)}
    
    def encode(self, number: int) -> str:
        """
        Convert an identifier to Base62, most significant symbol first.
        
        0 encodes to "0"; no other alias starts with the zero symbol.
        """
        if number < 0:
            raise ValueError(f"Cannot encode negative identifier {number}")
        
        symbols = []
        while True:
            number, remainder = divmod(number, self.BASE)
            symbols.append(self.BASE62_CHARS[remainder])
            if number == 0:
                break
        
        return "".join(reversed(symbols))
    
    def decode(self, alias: str) -> int:
        """
        Convert an alias back to its identifier.
        
        Raises:
            InvalidAlias: if the alias is empty or contains a symbol
                outside the alphabet
        """
        if not alias:
            raise InvalidAlias("Alias must not be empty")
        
        number = 0
        for char in alias:
            try:
                number = number * self.BASE + self._index[char]
            except KeyError:
                raise InvalidAlias(f"Invalid symbol {char!r} in alias {alias!r}") from None
        return number
    
    def is_canonical(self, alias: str) -> bool:
        """True if alias is exactly what encode() produces for some identifier"""
        try:
            return self.encode(self.decode(alias)) == alias
        except InvalidAlias:
            return False


_encoder = Base62Encoder()

encode = _encoder.encode
decode = _encoder.decode
is_canonical_alias = _encoder.is_canonical
