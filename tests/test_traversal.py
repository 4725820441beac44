# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for tree passes over container children."""

from article_markup import (
    Audio,
    Caption,
    Cite,
    GeoTag,
    Image,
    Slideshow,
    is_tree_valid,
    iter_elements,
    validation_warnings,
)


def build_slideshow(first_url='a.jpg'):
    first = (
        Image.create()
        .with_url(first_url)
        .with_caption(Caption.create().with_title('One').with_credit(Cite.create().with_text('Jane')))
    )
    return (
        Slideshow.create()
        .add_image(first)
        .add_image(Image.create().with_url('b.jpg'))
        .with_caption(Caption.create().with_title('Holidays'))
        .with_map_geotag(GeoTag.create().with_script('{}'))
        .with_audio(Audio.create().with_url('a.mp3'))
    )


class TestIterElements:
    """Tests for iter_elements."""

    def test_depth_first_paths(self):
        """Test order and paths of a full walk."""
        walked = [(path, type(element).__name__) for path, element in iter_elements(build_slideshow())]
        assert walked == [
            ('Slideshow', 'Slideshow'),
            ('Slideshow.#0', 'Image'),
            ('Slideshow.#0.#0', 'Caption'),
            ('Slideshow.#0.#0.#0', 'Cite'),
            ('Slideshow.#1', 'Image'),
            ('Slideshow.#2', 'Caption'),
            ('Slideshow.#3', 'Audio'),
        ]

    def test_geotag_is_not_visited(self):
        """Test the geotag, excluded from container children, is skipped."""
        elements = [element for _, element in iter_elements(build_slideshow())]
        assert not any(isinstance(element, GeoTag) for element in elements)

    def test_leaf_element(self):
        """Test a non-container yields only itself."""
        cite = Cite.create()
        assert list(iter_elements(cite)) == [('Cite', cite)]


class TestValidationWarnings:
    """Tests for validation_warnings and is_tree_valid."""

    def test_valid_tree(self):
        """Test no warnings for a fully valid tree."""
        slideshow = build_slideshow()
        assert validation_warnings(slideshow) == []
        assert is_tree_valid(slideshow) is True

    def test_invalid_child_reported(self):
        """Test an invalid image is reported while the slideshow stays valid."""
        slideshow = build_slideshow(first_url='')
        assert slideshow.is_valid() is True
        assert validation_warnings(slideshow) == [
            'Slideshow.#0: Image is not valid and will not be rendered',
        ]
        assert is_tree_valid(slideshow) is False

    def test_invalid_geotag_not_reported(self):
        """Test an invalid geotag goes unnoticed by container passes."""
        slideshow = build_slideshow().with_map_geotag(GeoTag.create())
        assert validation_warnings(slideshow) == []
