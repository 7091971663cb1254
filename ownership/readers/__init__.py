"""Document readers.

One reader per source format.  Each returns a ``SourceRecord`` holding the
record id and the raw owner candidates; see ``base`` for the contract and
``registry`` for extension lookup.
"""
