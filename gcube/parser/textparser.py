import math
import re

import numpy as np

from . import MalformedInput, MalformedNumber, UnexpectedEndOfInput

_int_re = re.compile(r'[+-]?[0-9]+')
_float_re = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eEdD][+-]?[0-9]+)?')

def ffloat(text):
    '''Float conversion that also takes Fortran D exponents (1.0D-03).
    Surrounding whitespace is ignored.'''
    return float(text.strip().replace('D', 'E').replace('d', 'e'))

def trim(line):
    return line.strip()

def split(line, delimiter=' ', skip_empty=True):
    '''Split `line` on the single character `delimiter`. Contiguous delimiters
    produce empty tokens unless `skip_empty` is set. Callers are expected to
    trim first.'''
    tokens = line.split(delimiter)
    if skip_empty:
        return [token for token in tokens if token]
    return tokens

def parse_int(token, linenum=None):
    if not _int_re.fullmatch(token):
        raise MalformedNumber(token, int, linenum)
    return int(token)

def parse_float(token, linenum=None):
    '''Strictly convert `token` to a float. The whole token must be a number;
    Fortran D exponents are accepted. "nan", "inf" and values that
    overflow to infinity (1e999) are not.'''
    if not _float_re.fullmatch(token):
        raise MalformedNumber(token, float, linenum)
    value = ffloat(token)
    if not math.isfinite(value):
        raise MalformedNumber(token, float, linenum)
    return value

_parsers = {int: parse_int, float: parse_float}

def parse_number(token, kind, linenum=None):
    try:
        parser = _parsers[kind]
    except KeyError:
        raise TypeError('cannot parse numbers of type {!r}'.format(kind))
    return parser(token, linenum)


class TokenStream:
    '''A tokenizing text stream that supports both line-oriented reads and
    whitespace-token reads on the same underlying file. Reading a token
    leaves the remainder of its line pending; the next `readline()` returns
    that remainder rather than a fresh line.
    '''
    def __init__(self, textfile):
        self.textfile = textfile

        # Unconsumed remainder of the current line, or None at a line boundary
        self._pending = None

        # The last physical line read from the stream, without its newline
        self.line = None

        # The current (1-based) line number
        self.linenum = 0

    def _stream_readline(self, required=True):
        line = self.textfile.readline()
        if not line:
            if required:
                raise UnexpectedEndOfInput('unexpected end of file', self.linenum)
            return None
        self.linenum += 1
        self.line = line.rstrip('\r\n')
        return self.line

    def _take(self, ntokens):
        '''Return up to `ntokens` tokens from the current line, reading a new
        line first if at a line boundary. Returns an empty list for a blank
        line.'''
        if self._pending is None:
            self._pending = self._stream_readline()

        parts = self._pending.split(None, ntokens)
        if len(parts) > ntokens:
            self._pending = parts[ntokens]
            return parts[:ntokens]
        elif parts:
            self._pending = ''
            return parts
        else:
            self._pending = None
            return parts

    def readline(self):
        '''Return the rest of the current line if a token read left one
        pending, otherwise the next line of the stream.'''
        if self._pending is not None:
            line = self._pending
            self._pending = None
            return line
        return self._stream_readline()

    def discard_line(self):
        '''Discard the rest of the current line. Does nothing at end of file.'''
        if self._pending is not None:
            self._pending = None
        else:
            self._stream_readline(required=False)

    def next_token(self):
        '''Return the next whitespace-delimited token, wherever it is.'''
        while True:
            tokens = self._take(1)
            if tokens:
                return tokens[0]

    def next_int(self):
        return parse_int(self.next_token(), self.linenum)

    def next_float(self):
        return parse_float(self.next_token(), self.linenum)

    def read_floats(self, count, dtype=np.float64):
        '''Read exactly `count` floats, across as many lines as needed. Values
        too large for `dtype` are rejected rather than stored as infinity.'''
        values = np.empty(count, dtype=dtype)
        limit = np.finfo(dtype).max if np.issubdtype(dtype, np.floating) else None
        n = 0
        while n < count:
            tokens = self._take(count - n)
            for token in tokens:
                value = parse_float(token, self.linenum)
                if limit is not None and abs(value) > limit:
                    raise MalformedInput('value {!r} out of range for {}'
                                         .format(token, np.dtype(dtype).name), self.linenum)
                values[n] = value
                n += 1
        return values
