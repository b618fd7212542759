#!/usr/bin/env python3
"""
K-Edit-Distance FastAPI Server 실행 스크립트
"""

import sys


def check_dependencies():
    """의존성 확인"""
    print("🔍 Checking dependencies...")

    required_packages = [
        'fastapi',
        'uvicorn',
        'pydantic',
        'numpy',
        'regex'
    ]

    missing_packages = []

    for package in required_packages:
        try:
            __import__(package)
            print(f"   ✅ {package}")
        except ImportError:
            print(f"   ❌ {package}")
            missing_packages.append(package)

    if missing_packages:
        print(f"\n⚠️  Missing packages: {', '.join(missing_packages)}")
        print("   Please install them with: pip install -e .")
        return False

    print("✅ All dependencies are installed")
    return True


def main():
    """메인 함수"""
    print("🎯 K-Edit-Distance Server Launcher")
    print("=" * 50)

    if not check_dependencies():
        print("\n❌ Dependency check failed")
        return False

    # 의존성 확인이 끝난 뒤에 import
    import uvicorn
    from k_edit_distance.core.config import settings

    print(f"   URL: http://{settings.host}:{settings.port}")
    print(f"   Docs: http://{settings.host}:{settings.port}/docs")
    print("=" * 50)

    uvicorn.run(
        "k_edit_distance.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return True


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
