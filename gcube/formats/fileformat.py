import logging
import pathlib

logger = logging.getLogger(__name__)

class FileFormat:
    '''Base class for molecule file formats. Subclasses implement `read` and
    `write` against open text streams; diagnostics go to the error sink
    rather than being raised.'''

    # Lower-case file extensions handled, without the leading dot
    extensions = ()
    mime_types = ()

    def __init__(self):
        self._errors = []

    def append_error(self, message):
        logger.error(message)
        self._errors.append(message)

    def errors(self):
        return list(self._errors)

    def error_string(self):
        return '\n'.join(self._errors)

    def clear_errors(self):
        self._errors = []

    @classmethod
    def can_handle(cls, path):
        return pathlib.Path(path).suffix.lower().lstrip('.') in cls.extensions

    def read(self, infile, molecule):
        '''Populate `molecule` from the text stream `infile`. Returns True on
        success.'''
        raise NotImplementedError

    def write(self, outfile, molecule):
        '''Write `molecule` to the text stream `outfile`. Returns True on
        success.'''
        raise NotImplementedError

    def read_file(self, path, molecule):
        # Undecodable bytes in free-text lines become U+FFFD
        with open(path, 'rt', encoding='utf-8', errors='replace') as infile:
            return self.read(infile, molecule)

    def write_file(self, path, molecule):
        with open(path, 'wt', encoding='utf-8') as outfile:
            return self.write(outfile, molecule)
