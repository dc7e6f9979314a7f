#!/usr/bin/env python3
import subprocess, sys

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    run("Manhattan fifo", f"{sys.executable} -m greedy8.experiments.runner --count 100 --heuristic manhattan --tie_break fifo")
    run("Manhattan lifo", f"{sys.executable} -m greedy8.experiments.runner --count 100 --heuristic manhattan --tie_break lifo")
    run("LinearConflict fifo", f"{sys.executable} -m greedy8.experiments.runner --count 100 --heuristic linear_conflict")
    run("Manhattan + unsolvable twins", f"{sys.executable} -m greedy8.experiments.runner --count 5 --include_unsolvable")

if __name__ == "__main__":
    main()
