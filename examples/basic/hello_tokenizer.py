"""Tokenize a sentence with three rules, ignoring whitespace."""

from chunklex import Tokenizer

t = Tokenizer()
t.add_rule(r"^,$", "comma")
t.add_rule(r"^[a-z]+$", "word")
t.add_rule(r"^\s+$", "whitespace")
t.set_ignored("whitespace")

t.tokenize("cat, dog", lambda text, name: print(f"( word: {text}; token: {name} )"))
