from relation_materializer.materializer.relation_views import RelationViews


def singular(label: str) -> str:
    irregular = {"People": "Person"}
    if label in irregular:
        return irregular[label]
    return label[:-1] if label.endswith("s") else label


def render_view(view: dict, key_label: str, value_label: str) -> list[str]:
    lines = [f"{key_label} -> {value_label}:"]
    prefix = singular(value_label)
    for key, values in view.items():
        lines.append(f"--{key!r}")
        for value in values:
            lines.append(f"----{prefix}:{value!r}")
    return lines


def render_views(views: RelationViews, a_label: str = "People", b_label: str = "Houses") -> str:
    lines = render_view(views.forward, a_label, b_label)
    lines += render_view(views.reverse, b_label, a_label)
    return "\n".join(lines)
