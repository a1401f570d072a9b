"""
# pngstash

A PNG file is a signature followed by a sequence of records, the chunks:

    length | type | data | crc

Three layers are defined, each one on top of the previous

 1. ChunkType: the four letters naming a chunk, whose case encodes
    some properties of the chunk itself (critical, public, ...)

 2. Chunk: the record, with length and crc always derived from
    the type and the data

 3. PNGFile: the signature and the ordered list of chunks

For each layer two basic operations are defined:

 1. parse(): reading the binary data and building a high-level
    representation of that, failing loudly if something doesn't add up

 2. as_bytes(): encode the high-level representation into binary data,
    so that parse() followed by as_bytes() gives back the original bytes.

Hiding a message is just appending an ancillary chunk with the message as data.
"""
