import geocalc


def test_compile():
    import geocalc.coordinates
    import geocalc.transforms
    import geocalc.utils.logging

    for name in geocalc.__all__:
        assert hasattr(geocalc, name)

    assert geocalc.LOGGER.name == 'geocalc'
    assert isinstance(geocalc.__version__, str)
