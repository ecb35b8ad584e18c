import pytest

from mifview.image import Image
from mifview.pixel import Pixel
from mifview.processors import ColorFilter, Processor, StructureDetector

GREEN = Pixel(0.0, 1.0, 0.0)
BLACK = Pixel()
RED = Pixel(1.0, 0.0, 0.0)
BLUE = Pixel(0.0, 0.0, 1.0)


def _image(rows):
    image = Image(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, pixel in enumerate(row):
            image.set_pixel(x, y, pixel)
    return image


def _green_positions(image):
    return {(x, y) for x, y, p in image.iter_pixels() if p == GREEN}


def test_filter_keeps_matching_and_grays_others():
    image = _image([[RED, BLUE]])
    ColorFilter(RED).process(image)
    assert image.get_pixel(0, 0) == RED
    assert image.get_pixel(1, 0) == BLUE.grayscale()


def test_filter_keeps_pixels_within_tolerance():
    near = Pixel(0.97, 0.02, 0.0)
    image = _image([[near]])
    ColorFilter(RED).process(image)
    assert image.get_pixel(0, 0) == near


def test_filter_output_is_gray_outside_reference():
    image = _image([[RED, BLUE], [Pixel(0.2, 0.6, 0.9), RED]])
    ColorFilter(RED).process(image)
    for _, _, pixel in image.iter_pixels():
        if pixel != RED:
            assert pixel.red == pixel.green == pixel.blue


def test_detector_marks_connected_region():
    image = _image([[RED, RED, BLUE], [BLUE, BLUE, BLUE], [BLUE, BLUE, RED]])
    StructureDetector(1, 0, RED).process(image)
    assert _green_positions(image) == {(0, 0), (1, 0)}
    assert image.get_pixel(2, 2) == BLACK
    assert image.get_pixel(1, 1) == BLACK


def test_detector_follows_diagonals():
    image = _image([[RED, BLUE, BLUE], [BLUE, RED, BLUE], [BLUE, BLUE, RED]])
    StructureDetector(2, 2, RED).process(image)
    assert _green_positions(image) == {(0, 0), (1, 1), (2, 2)}


def test_detector_does_not_grow_from_origin():
    image = _image([[RED, RED], [RED, RED]])
    StructureDetector(0, 0, RED).process(image)
    assert _green_positions(image) == {(0, 0)}


def test_detector_reaches_whole_uniform_image_from_elsewhere():
    image = _image([[RED, RED], [RED, RED]])
    StructureDetector(1, 1, RED).process(image)
    assert _green_positions(image) == {(0, 0), (1, 0), (0, 1), (1, 1)}


def test_detector_start_outside_gives_black_image():
    image = _image([[RED, RED], [RED, RED]])
    StructureDetector(5, -1, RED).process(image)
    assert all(p == BLACK for _, _, p in image.iter_pixels())


def test_detector_start_not_matching_gives_black_image():
    image = _image([[RED, BLUE]])
    StructureDetector(1, 0, RED).process(image)
    assert all(p == BLACK for _, _, p in image.iter_pixels())


def test_detector_keeps_size_and_metadata():
    image = _image([[RED, BLUE]])
    image.metadata.set("author", "someone")
    image.unit = "cm"
    StructureDetector(1, 0, BLUE).process(image)
    assert (image.width, image.height) == (2, 1)
    assert image.metadata["author"] == "someone"
    assert image.unit == "cm"


def test_processor_is_abstract():
    with pytest.raises(TypeError):
        Processor()