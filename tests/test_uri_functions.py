import functools
from urllib.parse import quote
from urllib.parse import quote_plus
from urllib.parse import unquote_plus

import pytest

from urikit import QueryParams
from urikit.util import uri


class TestEncode:
    def test_uri_encode(self):
        url = 'http://example.com/v1/fizbit/messages?limit=3&echo=true'
        assert uri.encode(url) == url

        url = 'http://example.com/v1/fiz bit/messages'
        expected = 'http://example.com/v1/fiz%20bit/messages'
        assert uri.encode(url) == expected

        url = 'http://example.com/v1/fizbit/messages?limit=3&eçho=true'
        expected = 'http://example.com/v1/fizbit/messages?limit=3&e%C3%A7ho=true'
        assert uri.encode(url) == expected

        assert uri.encode('%26') == '%2526'
        assert uri.decode(uri.encode('%26')) == '%26'

    def test_uri_encode_value(self):
        assert uri.encode_value('abcd') == 'abcd'
        assert uri.encode_value('ab cd') == 'ab%20cd'
        assert uri.encode_value('ç') == '%C3%A7'
        assert uri.encode_value('ç€') == '%C3%A7%E2%82%AC'
        assert uri.encode_value('ab/cd') == 'ab%2Fcd'
        assert uri.encode_value('ab+cd=42,9') == 'ab%2Bcd%3D42%2C9'

        assert uri.encode_value('%26') == '%2526'
        assert uri.decode(uri.encode_value('%26')) == '%26'

    def test_encode_url(self):
        assert uri.encode_url('abcd') == 'abcd'
        assert uri.encode_url('ab cd') == 'ab+cd'
        assert uri.encode_url('moin moin!') == 'moin+moin%21'
        assert uri.encode_url('a+b c') == 'a%2Bb+c'
        assert uri.encode_url('100%') == '100%25'
        assert uri.encode_url('ç €') == '%C3%A7+%E2%82%AC'
        assert uri.encode_url('') == ''

    def test_encode_url_name(self):
        assert uri.encode_url.__name__ == 'encode_url'
        assert uri.encode_value.__name__ == 'encode_value'

    def test_prop_uri_encode_models_stdlib_quote(self, arbitrary_uris):
        equiv_quote = functools.partial(quote, safe=uri._ALL_ALLOWED)
        for case in arbitrary_uris:
            assert uri.encode(case) == equiv_quote(case)

    def test_prop_uri_encode_value_models_stdlib_quote_safe_tilde(self, arbitrary_uris):
        equiv_quote = functools.partial(quote, safe='~')
        for case in arbitrary_uris:
            assert uri.encode_value(case) == equiv_quote(case)

    def test_prop_encode_url_models_stdlib_quote_plus(self, arbitrary_uris):
        equiv_quote = functools.partial(quote_plus, safe='~')
        for case in arbitrary_uris:
            assert uri.encode_url(case) == equiv_quote(case)


class TestDecode:
    def test_uri_decode(self, decode_approach):
        assert uri.decode('abcd') == 'abcd'
        assert uri.decode('ab%20cd') == 'ab cd'

        assert uri.decode('This thing is %C3%A7') == 'This thing is ç'

        assert (
            uri.decode('This thing is %C3%A7%E2%82%AC') == 'This thing is ç€'
        )

        assert uri.decode('ab%2Fcd') == 'ab/cd'

        assert (
            uri.decode('http://example.com?x=ab%2Bcd%3D42%2C9')
            == 'http://example.com?x=ab+cd=42,9'
        )

    @pytest.mark.parametrize(
        'encoded,expected',
        [
            ('ab%2Gcd', 'ab%2Gcd'),
            ('ab%2Fcd: 100% coverage', 'ab/cd: 100% coverage'),
            ('%s' * 100, '%s' * 100),
        ],
    )
    def test_uri_decode_bad_coding(self, encoded, expected, decode_approach):
        assert uri.decode(encoded) == expected

    @pytest.mark.parametrize(
        'encoded,expected',
        [
            ('+%80', ' �'),
            ('+++%FF+++', '   �   '),  # impossible byte
            ('%fc%83%bf%bf%bf%bf', '�' * 6),  # overlong sequence
            ('%ed%ae%80%ed%b0%80', '�' * 6),  # paired UTF-16 surrogates
        ],
    )
    def test_uri_decode_bad_unicode(self, encoded, expected, decode_approach):
        assert uri.decode(encoded) == expected

    def test_uri_decode_unquote_plus(self, decode_approach):
        assert uri.decode('/disk/lost+found/fd0') == '/disk/lost found/fd0'
        assert uri.decode('/disk/lost+found/fd0', unquote_plus=False) == (
            '/disk/lost+found/fd0'
        )
        assert uri.decode(
            'http://example.com?x=ab%2Bcd%3D42%2C9', unquote_plus=False
        ) == ('http://example.com?x=ab+cd=42,9')

    def test_decode_url_accepts_plus_and_percent_space(self, decode_approach):
        assert uri.decode_url('moin+moin') == 'moin moin'
        assert uri.decode_url('moin%20moin') == 'moin moin'
        assert uri.decode_url('a%2Bb+c') == 'a+b c'

    def test_prop_uri_decode_models_stdlib_unquote_plus(self, arbitrary_uris):
        for case in arbitrary_uris:
            case = uri.encode_value(case)
            assert uri.decode(case) == unquote_plus(case)

    def test_prop_decode_url_inverts_encode_url(self, arbitrary_uris, decode_approach):
        for case in arbitrary_uris:
            assert uri.decode_url(uri.encode_url(case)) == case


class TestParseQueryString:
    def test_parse_query_string(self):
        query_string = (
            'a=http%3A%2F%2Fexample.org%3Ftest%3D1'
            '&b=%7B%22test1%22%3A%20%22data1%22%'
            '2C%20%22test2%22%3A%20%22data2%22%7D'
            '&c=1,2,3'
            '&d=test'
            '&e=a,,%26%3D%2C'
            '&f=a&f=a%3Db'
            '&%C3%A9=a%3Db'
        )

        result = uri.parse_query_string(query_string)
        assert isinstance(result, QueryParams)
        assert result['a'] == 'http://example.org?test=1'
        assert result['b'] == '{"test1": "data1", "test2": "data2"}'
        assert result['c'] == '1,2,3'
        assert result['d'] == 'test'
        assert result['e'] == 'a,,&=,'
        assert result['f'] == 'a=b'
        assert result.get_all('f') == ['a', 'a=b']
        assert result['é'] == 'a=b'
        assert list(result) == ['a', 'b', 'c', 'd', 'e', 'f', 'é']

    @pytest.mark.parametrize(
        'query_string,keep_blank,expected',
        [
            ('', True, {}),
            ('', False, {}),
            ('flag1&&&&&flag2&&&', True, {'flag1': '', 'flag2': ''}),
            ('flag1&&&&&flag2&&&', False, {}),
            ('flag=&x=1', False, {'x': '1'}),
            ('malformed=%FG%1%Hi%%%a', False, {'malformed': '%FG%1%Hi%%%a'}),
            ('=', False, {}),
            ('==', True, {}),
            ('=x&y=', True, {'y': ''}),
            ('%=&%%=&&%%%=', False, {}),
            ('%=&%%=&&%%%=', True, {'%': '', '%%': '', '%%%': ''}),
            ('+=&%+=&&%++=', True, {' ': '', '% ': '', '%  ': ''}),
            ('q=a+b%20c', True, {'q': 'a b c'}),
            ('spade=♠&spade=♣', False, {'spade': '♣'}),
        ],
    )
    def test_parse_query_string_edge_cases(self, query_string, keep_blank, expected):
        assert uri.parse_query_string(query_string, keep_blank=keep_blank) == expected

    def test_parse_query_string_not_str(self):
        with pytest.raises(TypeError):
            uri.parse_query_string(None)


class TestParseHost:
    def test_parse_host(self):
        ipv6_addr = '2001:4801:1221:101:1c10::f5:116'

        assert uri.parse_host('[' + ipv6_addr + ']') == ('[' + ipv6_addr + ']', None)
        assert uri.parse_host('[' + ipv6_addr + ']:28080') == (
            '[' + ipv6_addr + ']',
            28080,
        )
        assert uri.parse_host('[::1]:42') == ('[::1]', 42)
        assert uri.parse_host('[::1]', default_port=80) == ('[::1]', 80)

        assert uri.parse_host('173.203.44.122') == ('173.203.44.122', None)
        assert uri.parse_host('173.203.44.122', default_port=80) == (
            '173.203.44.122',
            80,
        )
        assert uri.parse_host('173.203.44.122:27070') == ('173.203.44.122', 27070)

        assert uri.parse_host('example.com') == ('example.com', None)
        assert uri.parse_host('example.com', default_port=443) == ('example.com', 443)
        assert uri.parse_host('example.com:9876') == ('example.com', 9876)
        assert uri.parse_host('example.com:', default_port=80) == ('example.com', 80)

    def test_parse_host_port_not_range_checked(self):
        assert uri.parse_host('example.com:99999') == ('example.com', 99999)
        assert uri.parse_host('example.com:-1') == ('example.com', -1)

    @pytest.mark.parametrize(
        'host',
        [
            '[::1',
            '[::1]x',
            '[::1]:http',
            '::1',
            '2001:ODB8:AC10:FE01::',
            'example.com:http',
            'example.com: 80',
            'example.com:+80',
            'example.com:١',
        ],
    )
    def test_parse_host_malformed(self, host):
        with pytest.raises(ValueError):
            uri.parse_host(host)
