class DomainError(Exception):
    """
    Base class for all domain layer exceptions.
    Ensures a consistent exception hierarchy for catching deployer SPI issues.
    """

    pass
