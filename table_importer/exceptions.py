class TableImportError(Exception):
    pass


class DataSourceError(TableImportError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class UnsupportedFormatError(DataParseError):
    pass
