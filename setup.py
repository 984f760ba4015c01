
from setuptools import setup

setup(
    name =             "tileui",
    version =          "0.0.1",
    author =           "Christoph Landgraf",
    author_email =     "christoph.landgraf@googlemail.com",
    description =      "Resizable, nestable tile layouts for Text UIs",
    license =          "BSD",
    url =              "https://github.com/clandgraf/cui",
    packages =         ['tileui', 'tileui.term', 'tileui.tiles'],
    python_requires =  ">=3.6",
    extras_require =   {'test': ['pytest']},
    entry_points =     {'console_scripts': [
        'tileui-demo = tileui.__main__:main',
    ]}
)
