"""
Merkle tree construction over file content hashes.
"""

import logging
from typing import List, Optional, Sequence

from invention_proof.core.crypto import NodeCombiner, PrefixedConcatCombiner, is_prefixed_digest
from invention_proof.core.errors import EmptyInputError, InvalidLeafError
from invention_proof.core.models import MerkleCommitment, MerkleValue

logger = logging.getLogger(__name__)


class MerkleTree:
    """
    A binary Merkle tree built bottom-up from an ordered list of leaf hashes.

    Pairs are formed left to right on each level. When a level has an odd
    number of nodes, the last node is combined with itself. A single leaf is
    its own root and no combination takes place.

    The tree is built once on construction and is not modified afterwards.
    """

    def __init__(self, leaves: Sequence[str], combiner: Optional[NodeCombiner] = None):
        """Initialize a new Merkle tree with the given 0x-prefixed leaf hashes."""
        if not leaves:
            raise EmptyInputError("No leaf hashes provided")
        for index, leaf in enumerate(leaves):
            if not is_prefixed_digest(leaf):
                raise InvalidLeafError(index, leaf)

        self.leaves: List[str] = list(leaves)
        self.combiner: NodeCombiner = combiner or PrefixedConcatCombiner()
        self.levels: List[List[str]] = []
        self.generated: List[str] = []
        self._build_tree()

    @property
    def size(self) -> int:
        """Get the number of leaves in the tree."""
        return len(self.leaves)

    @property
    def root(self) -> str:
        """Get the Merkle root hash."""
        return self.levels[-1][0]

    @property
    def tree(self) -> List[str]:
        """
        The root followed by every other generated node.

        Non-root nodes appear in the reverse of the order they were generated,
        so the level just below the root comes first and the level just above
        the leaves comes last. Leaves are not included unless the single leaf
        is the root.
        """
        return [self.root] + list(reversed(self.generated[:-1]))

    @property
    def values(self) -> List[MerkleValue]:
        """Leaf hashes with their 1-based tree index, in submission order."""
        return [
            MerkleValue(value=leaf, tree_index=index + 1)
            for index, leaf in enumerate(self.leaves)
        ]

    def _build_tree(self) -> None:
        """Build the tree from the leaves up."""
        current_level = list(self.leaves)
        self.levels = [current_level]

        while len(current_level) > 1:
            next_level = []
            for i in range(0, len(current_level), 2):
                left = current_level[i]
                # Duplicate the last node on odd levels
                right = current_level[i + 1] if i + 1 < len(current_level) else left
                parent = self.combiner.combine(left, right)
                next_level.append(parent)
                self.generated.append(parent)

            logger.debug("Built level %d with %d nodes", len(self.levels), len(next_level))
            current_level = next_level
            self.levels.append(current_level)

    def to_commitment(self) -> MerkleCommitment:
        """Export the tree as a ``MerkleCommitment``."""
        return MerkleCommitment(root=self.root, tree=self.tree, values=self.values)


def build_commitment(
    leaves: Sequence[str],
    combiner: Optional[NodeCombiner] = None
) -> MerkleCommitment:
    """
    Build a Merkle commitment over ``leaves``.

    Args:
        leaves: 0x-prefixed 32-byte hex digests in submission order.
        combiner: Node combination rule. Defaults to ``PrefixedConcatCombiner``.

    Returns:
        The root, the generated nodes and the leaf index assignments.

    Raises:
        EmptyInputError: If ``leaves`` is empty.
        InvalidLeafError: If a leaf is not a 0x-prefixed 32-byte hex digest.
    """
    tree = MerkleTree(leaves, combiner=combiner)
    logger.debug("Merkle root %s over %d leaves", tree.root, tree.size)
    return tree.to_commitment()


__all__ = ["MerkleTree", "build_commitment"]
