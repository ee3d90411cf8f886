from spaceind.core.use_cases.process_block import BlockProcessor, ProcessStats

__all__ = ["BlockProcessor", "ProcessStats"]
