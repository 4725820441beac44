# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Slideshow validation, rendering and container children."""

import pytest

from article_markup import (
    Audio,
    Caption,
    GeoTag,
    Image,
    InvalidArgument,
    MarkupDocument,
    Slideshow,
)


def valid_image(url='http://mydomain.com/img.jpg'):
    return Image.create().with_url(url)


def invalid_image():
    return Image.create()


def full_slideshow(images):
    return (
        Slideshow.create()
        .with_images(images)
        .with_caption(Caption.create().with_title('Holidays'))
        .with_map_geotag(GeoTag.create().with_script({'type': 'Point'}))
        .with_audio(Audio.create().with_url('http://mydomain.com/song.mp3'))
    )


class TestSlideshowBuilding:
    """Tests for the factory and fluent setters."""

    def test_create_defaults(self):
        """Test a new slideshow is empty."""
        slideshow = Slideshow.create()
        assert isinstance(slideshow, Slideshow)
        assert slideshow.images == []
        assert slideshow.caption is None
        assert slideshow.geotag is None
        assert slideshow.audio is None

    def test_attribution_is_always_none(self):
        """Test attribution stays None however the slideshow is built."""
        slideshow = full_slideshow([valid_image()])
        assert slideshow.attribution is None
        assert not hasattr(slideshow, 'with_attribution')

    def test_fluent_setters_return_self(self):
        """Test every setter returns the same slideshow."""
        slideshow = Slideshow.create()
        assert slideshow.add_image(valid_image()) is slideshow
        assert slideshow.with_images([valid_image()]) is slideshow
        assert slideshow.with_caption(Caption.create()) is slideshow
        assert slideshow.with_map_geotag(GeoTag.create()) is slideshow
        assert slideshow.with_audio(Audio.create()) is slideshow

    def test_add_image_keeps_order(self):
        """Test images keep insertion order."""
        first, second = valid_image('a.jpg'), valid_image('b.jpg')
        slideshow = Slideshow.create().add_image(first).add_image(second)
        assert slideshow.images == [first, second]

    def test_with_images_replaces(self):
        """Test with_images replaces previously added images."""
        image = valid_image()
        slideshow = Slideshow.create().add_image(valid_image()).with_images([image])
        assert slideshow.images == [image]

    def test_with_images_copies_input(self):
        """Test later changes to the given list do not leak in."""
        images = [valid_image()]
        slideshow = Slideshow.create().with_images(images)
        images.append(valid_image())
        assert len(slideshow.images) == 1

    def test_wrong_types_raise(self):
        """Test setters reject arguments of the wrong type."""
        slideshow = Slideshow.create()
        with pytest.raises(InvalidArgument):
            slideshow.add_image('http://mydomain.com/img.jpg')
        with pytest.raises(InvalidArgument):
            slideshow.with_images([valid_image(), 'b.jpg'])
        with pytest.raises(InvalidArgument):
            slideshow.with_caption('Holidays')
        with pytest.raises(InvalidArgument):
            slideshow.with_audio(valid_image())
        with pytest.raises(InvalidArgument):
            slideshow.with_map_geotag({'type': 'Point'})


class TestSlideshowValidity:
    """Tests for is_valid: one valid image is enough."""

    def test_empty_is_invalid(self):
        """Test a slideshow without images is invalid."""
        assert Slideshow.create().is_valid() is False

    def test_all_invalid_images(self):
        """Test only invalid images make the slideshow invalid."""
        slideshow = full_slideshow([invalid_image(), invalid_image()])
        assert slideshow.is_valid() is False

    @pytest.mark.parametrize(
        'validity',
        [[True], [False, True], [True, False], [False, False, True]],
    )
    def test_any_valid_image(self, validity):
        """Test one valid image anywhere makes the slideshow valid."""
        images = [valid_image() if ok else invalid_image() for ok in validity]
        assert Slideshow.create().with_images(images).is_valid() is True

    def test_short_circuits(self):
        """Test images after the first valid one are not checked."""
        checked = []

        class TrackedImage(Image):
            def is_valid(self):
                checked.append(self)
                return super().is_valid()

        first = TrackedImage.create().with_url('a.jpg')
        second = TrackedImage.create().with_url('b.jpg')
        assert Slideshow.create().with_images([first, second]).is_valid() is True
        assert checked == [first]


class TestSlideshowRendering:
    """Tests for to_markup_node."""

    def test_invalid_renders_placeholder(self):
        """Test an invalid slideshow collapses whatever else it carries."""
        doc = MarkupDocument()
        node = full_slideshow([invalid_image()]).to_markup_node(doc)
        assert node.is_empty
        assert node.document is doc
        assert doc.to_markup(node) == ''

    def test_child_order(self):
        """Test images, then caption, geotag and audio."""
        doc = MarkupDocument()
        node = full_slideshow([valid_image(), valid_image()]).to_markup_node(doc)
        assert node.tag == 'figure'
        assert node.get_attr('class') == 'op-slideshow'
        assert [child.tag for child in node.children] == [
            'figure', 'figure', 'figcaption', 'script', 'audio',
        ]

    def test_invalid_images_still_rendered(self):
        """Test every image is delegated to, invalid ones included."""
        doc = MarkupDocument()
        slideshow = Slideshow.create().with_images([invalid_image(), valid_image('b.jpg')])
        node = slideshow.to_markup_node(doc)
        assert len(node.children) == 2
        assert node.children[0].is_empty
        assert node.children[1].tag == 'figure'
        assert doc.to_markup(node) == (
            '<figure class="op-slideshow"><figure><img src="b.jpg"/></figure></figure>'
        )

    def test_optional_parts_absent(self):
        """Test no caption, geotag or audio nodes when unset."""
        node = Slideshow.create().add_image(valid_image()).to_markup_node(MarkupDocument())
        assert len(node.children) == 1

    def test_node_is_detached(self):
        """Test the rendered node is not appended anywhere."""
        node = Slideshow.create().add_image(valid_image()).to_markup_node(MarkupDocument())
        assert node.parent is None

    def test_to_markup(self):
        """Test full serialization of a slideshow."""
        slideshow = full_slideshow([valid_image('a.jpg')])
        assert slideshow.to_markup() == (
            '<figure class="op-slideshow">'
            '<figure><img src="a.jpg"/></figure>'
            '<figcaption><h1>Holidays</h1></figcaption>'
            '<script type="application/json" class="op-geotag">{"type": "Point"}</script>'
            '<audio><source src="http://mydomain.com/song.mp3"/></audio>'
            '</figure>'
        )


class TestSlideshowContainerChildren:
    """Tests for get_container_children."""

    def test_images_caption_audio(self):
        """Test order is images, caption, audio."""
        images = [valid_image(), invalid_image()]
        slideshow = full_slideshow(images)
        assert slideshow.get_container_children() == [
            images[0], images[1], slideshow.caption, slideshow.audio,
        ]

    def test_geotag_never_a_child(self):
        """Test the geotag is excluded even on a valid slideshow."""
        slideshow = full_slideshow([valid_image()])
        assert slideshow.is_valid()
        assert slideshow.geotag not in slideshow.get_container_children()

    def test_empty(self):
        """Test an empty slideshow has no children."""
        assert Slideshow.create().get_container_children() == []
