"""
Domain - Node Registry and Element Binding
==========================================

The domain holds the nodes of a model and the elements attached to them.
Adding an element binds it: the element resolves its nodes, checks the
spatial dimension and computes whatever geometry it derives from node
positions.

Each node carries 6 DOFs: [ux, uy, uz, rx, ry, rz].

Typical Usage:
    >>> dom = Domain(ndm=3)
    >>> dom.add_node(Node3D(1, [1.0, 0.0, 0.0]))
    >>> dom.add_node(Node3D(2, [0.0, 1.0, 0.0]))
    >>> dom.add_element(pipe)          # calls pipe.set_domain(dom)
"""

import numpy as np


class Node3D:
    """
    Structural node with 6 DOFs.

    Attributes
    ----------
    tag : int
        Node identifier
    crds : np.ndarray
        Nodal coordinates
    disp : np.ndarray
        Trial displacement [ux, uy, uz, rx, ry, rz]
    disp_conv : np.ndarray
        Last committed displacement
    """
    DOFS_PER_NODE = 6

    def __init__(self, tag, coords):
        self.tag = tag
        self.crds = np.array(coords, dtype=float)
        self.disp = np.zeros(self.DOFS_PER_NODE)
        self.disp_conv = np.zeros(self.DOFS_PER_NODE)

    def get_crds(self):
        return self.crds

    def get_trial_disp(self):
        return self.disp

    def set_trial_disp(self, disp):
        disp = np.asarray(disp, dtype=float)
        if disp.shape != (self.DOFS_PER_NODE,):
            raise ValueError(f"Node {self.tag}: expected 6 displacement components, got {disp.shape}")
        self.disp = disp.copy()

    def commit_state(self):
        self.disp_conv = self.disp.copy()

    def revert_to_last_commit(self):
        self.disp = self.disp_conv.copy()

    def __repr__(self):
        return f"<Node3D tag={self.tag} crds={self.crds.tolist()}>"


class Domain:
    """
    Container of nodes and elements.

    Parameters
    ----------
    ndm : int
        Spatial dimension of the model
    """

    def __init__(self, ndm=3):
        self.ndm = ndm
        self.nodes = {}
        self.elements = {}

    def add_node(self, node):
        if node.tag in self.nodes:
            raise ValueError(f"Node {node.tag} already exists in the domain")
        self.nodes[node.tag] = node

    def get_node(self, tag):
        """Return the node with the given tag, or None if it does not exist."""
        return self.nodes.get(tag)

    def add_element(self, element):
        """
        Store an element and bind it to this domain.

        Returns
        -------
        int
            Binding status returned by element.set_domain (negative on a
            recoverable geometric failure)

        Raises
        ------
        ModelError
            The element cannot be bound; it is not stored
        """
        if element.tag in self.elements:
            raise ValueError(f"Element {element.tag} already exists in the domain")
        status = element.set_domain(self)
        self.elements[element.tag] = element
        return status

    def get_element(self, tag):
        return self.elements.get(tag)

    def __iter__(self):
        return iter(self.elements.values())

    def __len__(self):
        return len(self.elements)
