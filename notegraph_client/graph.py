def mark_roots(nodes, links):
    """
    Return copies of ``nodes`` with ``isRoot`` set: true iff no link targets the node.

    Mirrors ``notes.services.mark_roots`` on the server; the client stays free
    of Django imports, so keep the two in step.
    """
    targets = {link["target"] for link in links}
    return [dict(node, isRoot=node["id"] not in targets) for node in nodes]
