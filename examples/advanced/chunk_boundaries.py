"""Compare per-chunk flushing with end-of-stream flushing, and profile both."""

from chunklex import Tokenizer, TokenizerConfig
from chunklex.profiling import profiled_tokenize

text = "streaming tokenizers flush their pending buffer at chunk boundaries"

for flush_each_chunk in (True, False):
    t = Tokenizer(TokenizerConfig(chunk_size=16, step_size=4, flush_each_chunk=flush_each_chunk))
    t.add_rule(r"^[a-z]+$", "word")
    t.add_rule(r"^\s+$", "whitespace")
    t.set_ignored("whitespace")

    with profiled_tokenize() as metrics:
        words = [token.text for token in t.iter_tokens(text)]

    print(f"flush_each_chunk={flush_each_chunk}: {words}")
    print("  ", metrics.summary())
