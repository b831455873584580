import subprocess

import pytest


@pytest.mark.integration
def test_fix_pairs_end_to_end(temp_output_dir, write_fastq):
    """
    Runs the installed fix-pairs command on a small pair of desynchronized files.
    Verifies that the three output files are created with the expected reads.
    """
    forward = write_fastq("reads.1.fq", [(f"@read{i} 1:N:0:ACGT", "ACGTACGT", "IIIIIIII") for i in range(0, 100)])
    reverse = write_fastq(
        "reads.2.fq", [(f"@read{i} 2:N:0:ACGT", "TGCATGCA", "FFFFFFFF") for i in range(50, 150) if i % 7]
    )
    base = temp_output_dir / "fixed"

    for strategy in ("indexed", "memory"):
        cmd = ["fix-pairs", str(forward), str(reverse), str(base), "--strategy", strategy]
        print(f"Running command: {' '.join(cmd)}")
        result = subprocess.run(cmd, capture_output=True, text=True)

        if result.returncode != 0:
            print("STDOUT:", result.stdout)
            print("STDERR:", result.stderr)

        assert result.returncode == 0, f"fix-pairs failed with return code {result.returncode}"

        paired_forward = (temp_output_dir / "fixed.1.fq").read_text().splitlines()[0::4]
        paired_reverse = (temp_output_dir / "fixed.2.fq").read_text().splitlines()[0::4]
        unpaired = (temp_output_dir / "fixed.U.fq").read_text().splitlines()[0::4]

        expected_pairs = [i for i in range(50, 100) if i % 7]
        assert len(paired_forward) == len(paired_reverse) == len(expected_pairs)
        assert [h.split(" ")[0] for h in paired_forward] == [h.split(" ")[0] for h in paired_reverse]
        # 50 forward-only (0-49), 7 forward reads whose mates were dropped, 43 reverse-only (100-149)
        assert len(unpaired) == 50 + 7 + 43
