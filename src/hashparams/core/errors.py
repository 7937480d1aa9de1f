class InvalidParameterError(TypeError):
    pass


class HistoryError(Exception):
    pass
