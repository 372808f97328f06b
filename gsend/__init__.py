"""gsend: upload a file to a named SFTP destination."""

__version__ = "0.1.0"
