from vgakernel.kernel import BASE_COLOR, BOX_SIZE, handle_pic, kernel_main, make_board
from vgakernel.printing import put_string
from vgakernel.vga import HEIGHT, WIDTH, Framebuffer


def _board():
    fb = Framebuffer()
    make_board(fb)
    return fb


def test_board_top_left_is_base_color():
    assert _board().pixel(0, 0) == BASE_COLOR


def test_board_uses_two_colors():
    fb = _board()
    assert {v for row in fb.rows() for v in row} == {0x07, 0x17}


def test_neighbouring_squares_differ():
    fb = _board()
    for y in range(0, HEIGHT, BOX_SIZE):
        for x in range(0, WIDTH - BOX_SIZE, BOX_SIZE):
            assert fb.pixel(x, y) != fb.pixel(x + BOX_SIZE, y)
    for y in range(0, HEIGHT - BOX_SIZE, BOX_SIZE):
        assert fb.pixel(0, y) != fb.pixel(0, y + BOX_SIZE)


def test_squares_are_uniform():
    fb = _board()
    for y in range(HEIGHT):
        for x in range(WIDTH):
            corner = fb.pixel(x - x % BOX_SIZE, y - y % BOX_SIZE)
            assert fb.pixel(x, y) == corner


def test_kernel_main_draws_board():
    fb = Framebuffer()
    kernel_main(fb)
    assert fb.memory == _board().memory


def test_handle_pic_writes_label():
    expected = Framebuffer()
    put_string(expected, 0, 0, "PIC", 0x0A)
    actual = Framebuffer()
    handle_pic(actual)
    assert actual.memory == expected.memory
    assert {v for row in actual.rows() for v in row} == {0, 0x0A}


def test_handle_pic_over_board_keeps_board_elsewhere():
    fb = _board()
    handle_pic(fb)
    board = _board()
    assert list(fb.rows())[8:] == list(board.rows())[8:]