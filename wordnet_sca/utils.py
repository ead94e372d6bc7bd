# utils.py
from typing import List, Tuple

from streamlit_agraph import Node, Edge

from .wordnet_api import Synset


def get_words(text: str, sep=','):
    """Split user input into words, dropping blanks."""
    if not text:
        return []
    return [word.strip() for word in text.split(sep) if word.strip()]


def add_newline(s: str, max_char_per_line=30):
    # Break at the last space before each multiple of max_char_per_line
    replace_index = []
    for i in range(1, len(s) // max_char_per_line + 1):
        idx = s.rfind(' ', (i-1)*max_char_per_line, i*max_char_per_line+1)
        if idx != -1 and (not replace_index or idx > replace_index[-1]):
            replace_index.append(idx)

    parts = []
    last = 0
    for idx in replace_index:
        parts.append(s[last:idx].strip())
        last = idx + 1
    parts.append(s[last:].strip())

    return "\n".join(parts)


def synset_info(ss: Synset, sep=' - ') -> str:
    return sep.join([", ".join(ss.lemmas()), ss.definition(), str(ss.id())])


def path_to_graph(path: List[Synset], ancestor: Synset, show='lemmas') -> Tuple[List[Node], List[Edge]]:
    """Turn an ancestral path v -> ... -> a <- ... <- w into agraph nodes and edges.

    Edges point from hyponym to hypernym, so both halves of the path lead
    into the ancestor.

    Args:
        path: Synsets on the path.
        ancestor: The shortest common ancestor, somewhere on the path.
        show: 'lemmas', 'id', or 'lemmas + id'.

    Returns:
        nodes: list Node, the ancestor drawn in red
        edges: list Edge
    """
    if not path:
        return [], []

    top = [ss.id() for ss in path].index(ancestor.id())

    nodes = {}
    for i, ss in enumerate(path):
        if ss.id() in nodes:
            continue
        if show == 'lemmas':
            label = add_newline(", ".join(ss.lemmas()))
        elif show == 'id':
            label = str(ss.id())
        else:  # show == 'lemmas + id'
            label = add_newline(", ".join(ss.lemmas())) + '\n' + str(ss.id())
        nodes[ss.id()] = Node(
            id=ss.id(),
            label=label,
            title=add_newline(synset_info(ss), 50),
            level=abs(top - i),
            shape='box',
            color='#FF4B4B' if i == top else '#97C2FC',
        )

    edges = []
    for i in range(len(path) - 1):
        if i < top:
            edges.append(Edge(source=path[i].id(), target=path[i + 1].id()))
        else:
            edges.append(Edge(source=path[i + 1].id(), target=path[i].id()))

    return list(nodes.values()), edges

