from dataclasses import dataclass, field
import os

from chunking.models import ChunkingConfig
from pdf_extractor.text_extractor import DEFAULT_SUPPORTED_TYPES


@dataclass
class DocumentProcessingConfig:
    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    supported_content_types: tuple[str, ...] = tuple(sorted(DEFAULT_SUPPORTED_TYPES))
    read_block_size: int = 64 * 1024
    log_level: str = "INFO"

    @property
    def max_prompt_tokens(self) -> int:
        return self.chunking.max_prompt_tokens

    @property
    def max_chunk_tokens(self) -> int:
        return self.chunking.max_chunk_tokens

    @classmethod
    def from_env(cls) -> "DocumentProcessingConfig":
        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        def _float(name: str, default: float) -> float:
            value = os.environ.get(name)
            return float(value) if value else default

        defaults = ChunkingConfig()
        chunking = ChunkingConfig(
            max_prompt_tokens=_int("DOCPROC_MAX_PROMPT_TOKENS", defaults.max_prompt_tokens),
            max_chunk_tokens=_int("DOCPROC_CHUNK_TOKENS", defaults.max_chunk_tokens),
            chars_per_token=_float("DOCPROC_CHARS_PER_TOKEN", defaults.chars_per_token),
            min_keep_ratio=_float("DOCPROC_MIN_KEEP_RATIO", defaults.min_keep_ratio),
            tokenizer=os.environ.get("DOCPROC_TOKENIZER", defaults.tokenizer),
        )

        types = os.environ.get("DOCPROC_SUPPORTED_TYPES")
        supported = (
            tuple(t.strip() for t in types.split(",") if t.strip())
            if types
            else cls.supported_content_types
        )

        return cls(
            chunking=chunking,
            supported_content_types=supported,
            read_block_size=_int("DOCPROC_READ_BLOCK_SIZE", cls.read_block_size),
            log_level=os.environ.get("DOCPROC_LOG_LEVEL", cls.log_level),
        )
