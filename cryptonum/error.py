class CryptonumError(Exception):
    pass


class ZeroBoundError(CryptonumError):
    pass


class InvalidRangeError(CryptonumError):
    def __init__(self, message, low=None, high=None):
        super().__init__(message)
        self.message = message
        self.low = low
        self.high = high


class NonInvertibleError(CryptonumError):
    pass


class NegativeMagnitudeError(CryptonumError):
    pass
