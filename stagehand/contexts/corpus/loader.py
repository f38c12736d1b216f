"""
Corpus file loader.

Storage services own the real data; this adapter reads an exported snapshot
(YAML or JSON) so the search engine can be exercised from the command line
and from tests.

Expected layout:

    shows:
      - id: s1
        title: Birthday Surprise Gala
        tags: [comedy]
        updatedAt: 2026-10-15T18:00:00Z
        tasks:
          - {id: t1, title: Reset tables, createdAt: 1760659200000}
    ideas:
      - {id: i1, title: Closer trick, content: "..."}
"""

from pathlib import Path

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from stagehand.contexts.corpus.corpus_data_structure import Corpus
from stagehand.contexts.corpus.exceptions import CorpusLoadError


def load_corpus(path: Path) -> Corpus:
    """
    Load a corpus snapshot from a YAML or JSON file.

    Args:
        path: Path to the exported corpus file

    Returns:
        Corpus snapshot

    Raises:
        CorpusLoadError: If the file is missing, unparseable, or not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise CorpusLoadError("Corpus file not found", path=path)

    try:
        loaded = OmegaConf.load(path)
    except (OmegaConfBaseException, yaml.YAMLError, ValueError) as e:
        raise CorpusLoadError(f"Could not parse corpus file: {e}", path=path) from e

    if not OmegaConf.is_dict(loaded):
        raise CorpusLoadError("Corpus file must contain a mapping with 'shows' and 'ideas'", path=path)

    data = OmegaConf.to_container(loaded, resolve=False)
    return Corpus.from_dict(data)
