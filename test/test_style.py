import dataclasses
import unittest

from termstyle.ansi import Ansi, strip_ansi
from termstyle.cache import CacheSet
from termstyle.fidelity import Context, Level
from termstyle.style import Category, classify, Style, StyleCode


class TestStyle(unittest.TestCase):

    def test_conflicts(self) -> None:
        style = Style().red.blue
        self.assertEqual([c.code for c in style.codes], ['34'])
        self.assertEqual(style('x'), '\x1b[34mx\x1b[39m')

        style = Style().red.bg_blue.green.bg_hex('#000')
        self.assertEqual(
            [c.code for c in style.codes], ['32', '48;2;0;0;0']
        )

        style = Style().bold.bold.underline
        self.assertEqual([c.code for c in style.codes], ['1', '1', '4'])

    def test_apply(self) -> None:
        style = Style().bold.red
        self.assertEqual(style.apply('x'), '\x1b[1m\x1b[31mx\x1b[39m\x1b[22m')
        self.assertEqual(style('x'), style.apply('x'))
        self.assertEqual(str(style), '\x1b[1m\x1b[31m')
        self.assertEqual(style.sgr(), str(style))
        self.assertEqual(style.apply(None), '')
        self.assertEqual(Style().bold.apply(42), '\x1b[1m42\x1b[22m')
        self.assertEqual(Style().apply('plain'), 'plain')
        self.assertTrue(Style().plain)
        self.assertFalse(style.plain)

    def test_resets(self) -> None:
        style = Style().bold.underline.red
        self.assertEqual(style.resets, ('39', '24', '22'))
        self.assertEqual(Style().add('53').resets, ('0',))
        self.assertEqual(Style().add('5').resets, ('25',))
        self.assertEqual(Style().add(5, 25).resets, ('25',))
        self.assertEqual(Style().dim.resets, ('22',))
        self.assertEqual(Style().inverse.hidden.strikethrough.italic.resets, (
            '23', '29', '28', '27'
        ))

    def test_blink(self) -> None:
        style = Style().red.blink
        self.assertEqual(style.resets, ('25', '39'))
        self.assertEqual(style('x'), '\x1b[31m\x1b[5mx\x1b[25m\x1b[39m')
        self.assertEqual(StyleCode.of(5), StyleCode('5', '25', Category.ATTRIBUTE))

    def test_invalid_codes(self) -> None:
        style = Style().bold
        for code in ('', None, True, 1.5):
            with self.subTest(code=code):
                self.assertIs(style.add(code), style)  # type: ignore[arg-type]

    def test_colors(self) -> None:
        for style, code in [
            (Style().fg('red'), '31'),
            (Style().fg('Bright_Red'), '91'),
            (Style().bright_red, '91'),
            (Style().bg('red'), '41'),
            (Style().bg('bright blue'), '104'),
            (Style().bg_bright_white, '107'),
            (Style().gray, '90'),
            (Style().grey, '90'),
            (Style().bg_gray, '100'),
            (Style().fg('rebeccapurple'), '38;2;102;51;153'),
            (Style().fg((255, 0, 0)), '38;2;255;0;0'),
            (Style().fg(0x00FF00), '38;2;0;255;0'),
            (Style().bg('#00f'), '48;2;0;0;255'),
            (Style().hex('#ff8040'), '38;2;255;128;64'),
            (Style().bg_hex('ff8040'), '48;2;255;128;64'),
            (Style().rgb(255, 128, 0), '38;2;255;128;0'),
            (Style().bg_rgb(1, 2, 3), '48;2;1;2;3'),
            (Style().ansi256(196), '38;5;196'),
            (Style().bg_ansi256(0), '48;5;0'),
        ]:
            with self.subTest(code=code):
                self.assertEqual([c.code for c in style.codes], [code])

        self.assertEqual(Style().gray, Style().bright_black)
        self.assertEqual(Style().bg_grey, Style().bg_bright_black)

    def test_invalid_colors(self) -> None:
        style = Style().bold
        with self.assertLogs('termstyle', 'DEBUG'):
            self.assertIs(style.fg('notacolor'), style)
        self.assertIs(style.bg(None), style)  # type: ignore[arg-type]
        self.assertIs(style.ansi256(300), style)
        self.assertIs(style.ansi256(-1), style)
        self.assertIs(style.bg_ansi256(True), style)

    def test_no_color(self) -> None:
        style = Style(context=Context(Level.PLAIN)).bold.red.hex('#fff')
        self.assertEqual(style('x'), 'x')
        self.assertEqual(str(style), '')

    def test_force(self) -> None:
        style = Style(context=Context(Level.PLAIN, force=True)).hex('#ff0000')
        self.assertEqual(style('x'), '\x1b[38;2;255;0;0mx\x1b[39m')

        style = Style(context=Context(Level.ANSI, force=True)).hex('#ff0000')
        self.assertEqual(style('x'), '\x1b[38;2;255;0;0mx\x1b[39m')

    def test_eight_bit(self) -> None:
        context = Context(Level.EIGHT_BIT)
        self.assertEqual(
            Style(context=context).hex('#ffffff')('x'), '\x1b[38;5;231mx\x1b[39m'
        )
        self.assertEqual(
            Style(context=context).bg_hex('#eeeeee')('x'), '\x1b[48;5;255mx\x1b[49m'
        )
        self.assertEqual(
            Style(context=context).ansi256(42)('x'), '\x1b[38;5;42mx\x1b[39m'
        )

    def test_ansi(self) -> None:
        context = Context(Level.ANSI)
        style = Style(context=context).red.hex('#00ff00')
        self.assertEqual([c.code for c in style.codes], ['31'])
        self.assertEqual(style('x'), '\x1b[31mx\x1b[39m')
        self.assertEqual(Style(context=context).ansi256(42).codes, ())

    def test_with_context(self) -> None:
        style = Style().bold.hex('#ff0000').bg_red
        self.assertEqual(
            style('x'), '\x1b[1m\x1b[38;2;255;0;0m\x1b[41mx\x1b[49m\x1b[39m\x1b[22m'
        )

        downgraded = style.with_context(Context(Level.EIGHT_BIT))
        self.assertEqual(downgraded.codes, style.codes)
        self.assertEqual(
            downgraded('x'), '\x1b[1m\x1b[38;5;196m\x1b[41mx\x1b[49m\x1b[39m\x1b[22m'
        )

        basic = style.with_context(Context(Level.ANSI))
        self.assertEqual(basic('x'), '\x1b[1m\x1b[41mx\x1b[49m\x1b[22m')

    def test_caching(self) -> None:
        cache = CacheSet()
        style = Style(context=Context(cache=cache))
        style.hex('#abcdef')
        style.bg_hex('#ABCDEF')
        self.assertEqual(cache.hex.stats().hits, 1)
        self.assertEqual(Context(cache=cache), Context())

    def test_immutability(self) -> None:
        style = Style().bold
        red = style.red
        self.assertIsNot(style, red)
        self.assertEqual(len(style.codes), 1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            style.codes = ()  # type: ignore[misc]

    def test_strip_ansi(self) -> None:
        self.assertEqual(strip_ansi(Style().bold.hex('#123456')('hello')), 'hello')
        self.assertEqual(strip_ansi('\x1b[2J\x1b[1;1Hplain'), 'plain')
        self.assertEqual(strip_ansi('no escapes'), 'no escapes')

    def test_fuse(self) -> None:
        self.assertEqual(Ansi.fuse(Ansi.CSI, 38, 5, 1, 'm'), '\x1b[38;5;1m')
        self.assertEqual(Ansi.fuse(Ansi.CSI, None, 'm'), '\x1b[m')


class TestStyleCode(unittest.TestCase):

    def test_classify(self) -> None:
        for code, category in [
            ('31', Category.FOREGROUND),
            ('97', Category.FOREGROUND),
            ('38;5;1', Category.FOREGROUND),
            ('41', Category.BACKGROUND),
            ('107', Category.BACKGROUND),
            ('48;2;1;2;3', Category.BACKGROUND),
            ('39', Category.ATTRIBUTE),
            ('49', Category.ATTRIBUTE),
            ('1', Category.ATTRIBUTE),
            ('38', Category.ATTRIBUTE),
            ('x', Category.ATTRIBUTE),
        ]:
            with self.subTest(code=code):
                self.assertIs(classify(code), category)

    def test_of(self) -> None:
        self.assertEqual(StyleCode.of(1), StyleCode('1', '22', Category.ATTRIBUTE))
        self.assertEqual(StyleCode.of('31'), StyleCode('31', '39', Category.FOREGROUND))
        self.assertEqual(StyleCode.of(101), StyleCode('101', '49', Category.BACKGROUND))
        self.assertEqual(StyleCode.of('1;2'), StyleCode('1;2', '0', Category.ATTRIBUTE))

    def test_prepare(self) -> None:
        truecolor = StyleCode.of('38;2;255;0;0')
        self.assertIs(truecolor.prepare(Context()), truecolor)
        self.assertEqual(truecolor.prepare(Context(Level.EIGHT_BIT)).code, '38;5;196')  # type: ignore[union-attr]
        self.assertIsNone(truecolor.prepare(Context(Level.ANSI)))

        eight_bit = StyleCode.of('48;5;100')
        self.assertIs(eight_bit.prepare(Context(Level.EIGHT_BIT)), eight_bit)
        self.assertIsNone(eight_bit.prepare(Context(Level.ANSI)))

        basic = StyleCode.of(31)
        self.assertIs(basic.prepare(Context(Level.ANSI)), basic)


if __name__ == '__main__':
    unittest.main()
