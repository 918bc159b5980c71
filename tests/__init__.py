from typing import List


def cmd(command: str) -> List[str]:
    if len(command) == 0:
        return []
    return command.split(" ")
