"""Citation graph of a proof."""

from typing import Dict, List

import networkx as nx

from .step import Assumption, Copy, Premise


def _kind(step) -> str:
    if step.is_discharged_box:
        return "box"
    if isinstance(step.step_type, Premise):
        return "premise"
    if isinstance(step.step_type, Assumption):
        return "assumption"
    if isinstance(step.step_type, Copy):
        return "copy"
    return "rule"


def _add_steps(graph: nx.DiGraph, steps, depth: int, visible: Dict[int, object]):
    for index, step in steps:
        if step.is_discharged_box:
            inner = dict(visible)
            _add_steps(graph, step.prop.subproof, depth + 1, inner)
            node = ("box", index)
            graph.add_node(node, prop=step.prop, kind="box", depth=depth)
            graph.add_edge(inner[step.prop.subproof.starting_index], node)
            graph.add_edge(inner[step.prop.subproof.steps[-1][0]], node)
        else:
            node = index
            graph.add_node(node, prop=step.prop, kind=_kind(step), depth=depth)
            for cited in step.step_type.cited:
                if cited in visible:
                    graph.add_edge(visible[cited], node)
        visible[index] = node


def to_graph(proof) -> nx.DiGraph:
    """Build a directed graph with an edge from every step to the steps citing it.

    Ordinary steps are identified by their index. A discharged proof box is
    the node ``("box", i)``, where ``i`` is the index of its assumption, and
    depends on its assumption and on its last step.
    """
    graph = nx.DiGraph()
    visible = {}
    for depth, scope in enumerate(proof.scopes):
        _add_steps(graph, scope.sorted_items(), depth, visible)
    return graph


def unused_premises(proof) -> List[int]:
    """Premises of the global scope that the last global step does not depend on."""
    scope = proof.scopes[0]
    if not len(scope):
        return []

    graph = to_graph(proof)
    index, step = scope.last()
    target = ("box", index) if step.is_discharged_box else index
    needed = nx.ancestors(graph, target) | {target}
    return [i for i, s in scope.sorted_items()
            if isinstance(s.step_type, Premise) and i not in needed]
