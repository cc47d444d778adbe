import pytest

from ostengine.rendering import RenderTarget, TextureRenderTarget


def test_render_target_is_abstract():
    with pytest.raises(TypeError):
        RenderTarget()


def test_new_target_has_no_surface():
    target = TextureRenderTarget()
    assert target.surface is None
    assert (target.width, target.height) == (0, 0)


def test_create_allocates_surface_of_size():
    target = TextureRenderTarget()
    target.create(64, 32)
    assert (target.width, target.height) == (64, 32)
    assert target.surface.get_size() == (64, 32)


def test_resize_replaces_surface():
    target = TextureRenderTarget()
    target.create(64, 32)
    old = target.surface
    target.resize(10, 20)
    assert target.surface is not old
    assert target.surface.get_size() == (10, 20)
    assert (target.width, target.height) == (10, 20)


def test_negative_size_rejected():
    target = TextureRenderTarget()
    with pytest.raises(ValueError):
        target.create(-1, 5)


def test_bind_sets_viewport_and_active_target():
    target = TextureRenderTarget()
    target.create(30, 40)
    target.bind()
    assert target.is_bound
    assert target.viewport == (0, 0, 30, 40)
    target.unbind()
    assert not target.is_bound


def test_binding_another_target_replaces_active():
    first = TextureRenderTarget()
    second = TextureRenderTarget()
    first.create(8, 8)
    second.create(4, 4)
    first.bind()
    second.bind()
    assert second.is_bound
    assert not first.is_bound
    second.unbind()
    assert not second.is_bound