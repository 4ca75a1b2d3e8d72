from structerr.testing import test_registry

from .tests.errors import (
  test_E_without_fragments, test_E_with_fragments,
  test_E_last_fragment_wins, test_E_fragment_roles,
  test_E_wraps_copy, test_E_wraps_foreign,
  test_E_unrecognized_fragment, test_E_concurrent_use,
  test_Error_immutable, test_Error_render,
  test_Error_render_kind_other, test_Error_render_chain,
  test_Error_render_deep_chain,
  test_Kind_describe,
  test_causes, test_is_kind,
)

test_registry.register("structerr.errors.E", "without_fragments", test_E_without_fragments)
test_registry.register("structerr.errors.E", "with_fragments", test_E_with_fragments)
test_registry.register("structerr.errors.E", "last_fragment_wins", test_E_last_fragment_wins)
test_registry.register("structerr.errors.E", "fragment_roles", test_E_fragment_roles)
test_registry.register("structerr.errors.E", "wraps_copy", test_E_wraps_copy)
test_registry.register("structerr.errors.E", "wraps_foreign", test_E_wraps_foreign)
test_registry.register("structerr.errors.E", "unrecognized_fragment", test_E_unrecognized_fragment)
test_registry.register("structerr.errors.E", "concurrent_use", test_E_concurrent_use)
test_registry.register("structerr.errors.Error", "immutable", test_Error_immutable)
test_registry.register("structerr.errors.Error", "render", test_Error_render)
test_registry.register("structerr.errors.Error", "render_kind_other", test_Error_render_kind_other)
test_registry.register("structerr.errors.Error", "render_chain", test_Error_render_chain)
test_registry.register("structerr.errors.Error", "render_deep_chain", test_Error_render_deep_chain)
test_registry.register("structerr.errors.Kind", "describe", test_Kind_describe)
test_registry.register("structerr.errors.chain", "causes", test_causes)
test_registry.register("structerr.errors.chain", "is_kind", test_is_kind)
