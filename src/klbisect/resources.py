from pathlib import Path

# bundled example graphs
res_path = Path(__file__).parent.joinpath("res")
