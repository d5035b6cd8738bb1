"""
s3v4.exceptions
~~~~~~~~~~~~~~~

Exceptions raised while configuring and signing requests.
"""


class S3v4Error(Exception):
    """Base class for all s3v4 errors."""


class ConfigurationError(S3v4Error, ValueError):
    """
    A required signing input is missing or malformed.

    Raised before any hashing takes place, so a request is never
    partially signed.

    Args:
        message (str): Human readable description
        fields (iterable, optional): Names of the offending fields
    """

    def __init__(self, message, fields=()):
        super(ConfigurationError, self).__init__(message)
        self.fields = tuple(fields)

    @classmethod
    def missing(cls, fields):
        """Build the error for one or more missing required fields."""
        fields = tuple(fields)
        return cls(
            "Missing required field{0}: {1}".format(
                "s" if len(fields) > 1 else "", ", ".join(fields)
            ),
            fields,
        )

    @classmethod
    def combine(cls, missing=(), invalid=()):
        """
        Build one error out of every problem found in a set of inputs.

        Args:
            missing (iterable): Names of required fields that were not given
            invalid (iterable): ConfigurationError instances for the rest

        Returns:
            ConfigurationError: Fields list the missing names first
        """
        missing = tuple(missing)
        invalid = tuple(invalid)
        if not invalid:
            return cls.missing(missing)

        messages = [str(error) for error in invalid]
        fields = list(missing)
        for error in invalid:
            fields.extend(error.fields)
        if missing:
            messages.insert(0, str(cls.missing(missing)))
        return cls("; ".join(messages), fields)


class SigningError(S3v4Error, ValueError):
    """The signing inputs are inconsistent with each other."""
