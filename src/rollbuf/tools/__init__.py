"""Command line helpers that exercise :mod:`rollbuf` outside of tests."""
