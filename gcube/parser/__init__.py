class ParseError(RuntimeError):
    pass

class MalformedInput(ParseError):
    '''Structural decode failure. `linenum` is the (1-based) line on which
    the problem was found, if known.'''
    def __init__(self, message, linenum=None):
        super().__init__(message)
        self.linenum = linenum

    def __str__(self):
        message = super().__str__()
        if self.linenum:
            return 'line {:d}: {}'.format(self.linenum, message)
        return message

class MalformedNumber(MalformedInput):
    def __init__(self, token, kind, linenum=None):
        super().__init__('{!r} is not a valid {}'.format(token, kind.__name__), linenum)
        self.token = token
        self.kind = kind

class UnexpectedEndOfInput(MalformedInput):
    pass
