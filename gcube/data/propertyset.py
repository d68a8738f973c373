class PropertySet(dict):
    '''Free-form metadata attached to a molecule (title, comment line, grid
    layout, ...). Stored dict-like; the `source` attribute records where the
    values came from, e.g. the file they were read from.'''
    def __init__(self, iterable=None, source=None):
        super().__init__(iterable or {})

        self.source = source
