
def test_compile():
    # Every module imports with only the core dependencies installed
    import geoprojections._base
    import geoprojections._epsg_data
    import geoprojections.azimuthal
    import geoprojections.conic
    import geoprojections.conversion
    import geoprojections.ellipsoid
    import geoprojections.mercator
    import geoprojections.projections
    import geoprojections.registry

    from geoprojections import __version__
    assert __version__
