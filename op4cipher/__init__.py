"""The OP4 block cipher, its modes of operation, hex dump helpers and a self-check report."""

__version__ = "0.1.0"
__all__ = ["cipher", "hexdump", "demo"]