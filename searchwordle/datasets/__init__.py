from .lexicon import Lexicon, LoadError, load_lexicon, default_paths
from .validator import validate_wordlists, pretty_summary
from .io import read_words, write_lines

__all__ = [
    "Lexicon", "LoadError", "load_lexicon", "default_paths",
    "validate_wordlists", "pretty_summary",
]
