"""Extends resolution."""

from product_customizer.schemas.declarations import (
    OptionDeclaration,
    TypeDeclaration,
    unique,
    visibility_class,
)


def extends_classes(extends: tuple[str, ...]) -> tuple[str, ...]:
    """Visibility classes inherited through `extends`. Single level."""
    return tuple(visibility_class(target) for target in extends)


def resolve_type(declaration: TypeDeclaration) -> TypeDeclaration:
    classes = unique([*declaration.visibility_classes, *extends_classes(declaration.extends)])
    return declaration.model_copy(update={"visibility_classes": classes})


def resolve_option(declaration: OptionDeclaration) -> OptionDeclaration:
    """An option extending X is shown wherever it would be with `for: X`."""
    classes = unique([*declaration.for_, *extends_classes(declaration.extends)])
    return declaration.model_copy(update={"for_": classes})


def resolve_extends(
    types: dict[str, TypeDeclaration],
    options: dict[str, OptionDeclaration],
) -> tuple[dict[str, TypeDeclaration], dict[str, OptionDeclaration]]:
    """Expand `extends` into visibility classes on every type and option."""
    return (
        {slug: resolve_type(declaration) for slug, declaration in types.items()},
        {key: resolve_option(declaration) for key, declaration in options.items()},
    )
