#!/usr/bin/env python3
"""
테스트 실행 스크립트
"""
import subprocess
import sys
import os

def run_tests():
    """테스트 실행 (커버리지 포함)"""
    print("🧪 챗봇 백엔드 테스트를 시작합니다...")

    # 프로젝트 루트로 이동
    os.chdir(os.path.dirname(os.path.abspath(__file__)))

    result = subprocess.run([
        sys.executable, "-m", "pytest",
        "tests/",
        "-v",
        "--cov=.",
        "--cov-report=term-missing"
    ])

    if result.returncode == 0:
        print("✅ 모든 테스트가 통과했습니다!")
    else:
        print("❌ 일부 테스트가 실패했습니다.")

    return result.returncode == 0

if __name__ == "__main__":
    success = run_tests()
    sys.exit(0 if success else 1)
