"""Tests for the fluent builder."""

import iterm2_images as it2
from iterm2_images.create.builder import InlineImageBuilder


class TestInlineImageBuilder:

    def test_chaining_returns_builder(self) -> None:
        builder = InlineImageBuilder()
        assert builder.name("a").width_auto().inline() is builder

    def test_build_record(self) -> None:
        opts = (InlineImageBuilder()
            .name("chart.png")
            .width_percent(50)
            .height_pixels(300)
            .preserve_aspect_ratio(False)
            .inline()
            .build())
        assert opts.name == "chart.png"
        assert opts.width == "50%"
        assert opts.height == "300px"
        assert opts.preserve_aspect_ratio == "0"
        assert opts.inline == "1"

    def test_encode_matches_option_list(self, image_data: bytes) -> None:
        built = it2.options().name("x").height_cells(5).width_auto().encode(image_data)
        direct = it2.encode_inline_image(
            image_data,
            it2.with_name("x"),
            it2.with_height_cells(5),
            it2.with_width_auto(),
        )
        assert built == direct

    def test_write_to_sink(self, sink, image_data: bytes) -> None:
        written = it2.options().height_auto().inline(False).write_to(sink, image_data)
        assert written == len(sink.getvalue())
        assert b";height=auto;inline=0:" in sink.getvalue()

    def test_options_are_a_copy(self) -> None:
        builder = InlineImageBuilder().width_cells(1)
        collected = builder.options()
        collected.clear()
        assert len(builder.options()) == 1

    def test_later_call_wins(self) -> None:
        opts = InlineImageBuilder().width_cells(3).width_pixels(9).height_percent(1).height_auto().build()
        assert opts.width == "9px"
        assert opts.height == "auto"
