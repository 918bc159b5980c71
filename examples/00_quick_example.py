from typing import Annotated, List

from typed_args import Args, option


class Opts:
    """serve files from one or more directories"""

    logging: Annotated[bool, option("l")]
    port: Annotated[int, option("p", default=8080)]
    dirs: Annotated[List[str], option("d")]


opts = Args(Opts).name("serve").parse()

print(opts.__dict__)
