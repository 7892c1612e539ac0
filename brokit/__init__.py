"""Components of a Brotli-style compressor: context modelling, prefix and command tables, histograms, Huffman coding, literal costs, a ring buffer, bit writing and stream adapters."""

__version__ = "0.1.0"