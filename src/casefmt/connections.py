from importlib import resources

class ExampleDataSource:
    @property
    def yaml_path(self):
        """ Reference conversions, grouped by case style """
        return resources.files('casefmt.data').joinpath('examples.yaml')
