"""
Demonstration of the Nested Interval Tree Encoding

Builds a small catalogue tree, stores only each node's id, and then
recovers paths, parents and ancestry from those ids alone.
"""

from nested_intervals import TreeNode, NotCoprimeError


CATALOGUE = {
    "food": [1],
    "meat": [1, 1],
    "chicken": [1, 1, 1],
    "beef": [1, 1, 2],
    "steak": [1, 1, 2, 1],
    "pork": [1, 1, 3],
    "dairy": [1, 2],
    "milk": [1, 2, 1],
    "produce": [1, 3],
    "fruit": [1, 3, 1],
    "vegetables": [1, 3, 2],
    "vehicle": [2],
    "automobile": [2, 1],
    "airplane": [2, 2],
}


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demonstrate_storage():
    """Show the rows a table would hold for each node."""
    print_section("Stored rows")
    
    for name, path in CATALOGUE.items():
        node = TreeNode.from_path(path)
        print(f"{name:<12} {str(node):<10} id={node.id!s:<10} interval={node.interval}")


def demonstrate_decoding():
    """Recover structure from ids only."""
    print_section("Decoding from ids")
    
    ids = {name: TreeNode.from_path(path).id for name, path in CATALOGUE.items()}
    by_id = {v: k for k, v in ids.items()}
    
    steak = TreeNode.from_id(*ids["steak"])
    print(f"steak path:      {steak}")
    print(f"steak parent:    {by_id[steak.parent.id]}")
    print(f"steak lineage:   {[by_id[n.id] for n in steak.lineage()]}")
    
    food = TreeNode.from_id(*ids["food"])
    below = [name for name, node_id in ids.items() if food.is_ancestor_of(TreeNode.from_id(*node_id))]
    print(f"under food:      {below}")
    
    try:
        TreeNode.from_id(10, 4)
    except NotCoprimeError as e:
        print(f"rejected:        {e}")


if __name__ == "__main__":
    demonstrate_storage()
    demonstrate_decoding()
