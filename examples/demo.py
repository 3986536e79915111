#!/usr/bin/env python3
"""图像处理演示脚本。

展示 py_image_driver 库的核心功能，包括：
- 创建画布与绘制图形、文字
- 几何变换与颜色调整
- 多格式编码输出
- 创建与拆分 GIF 动画
"""

from pathlib import Path

from py_image_driver import Font, ImageError, ImageManager


def get_output_dir(subdir: str = "") -> Path:
    """获取输出目录 - 使用项目的 tmp 目录"""
    project_root = Path(__file__).parent.parent
    output_dir = project_root / "tmp" / "examples"
    if subdir:
        output_dir = output_dir / subdir
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def demo_drawing(manager: ImageManager) -> Path:
    """绘制演示"""
    print("=== 绘制演示 ===")

    output_dir = get_output_dir("drawing")
    image = manager.create(240, 160)
    image.draw_rectangle(0, 0, 240, 160, background_color="f0f0f0")
    image.draw_circle(60, 80, 40, background_color="ff6347", border_color="333333", border_size=2)
    image.draw_line((120, 20), (220, 140), "1e90ff", width=3)
    image.text("Hello", 110, 90, Font(size=28, color="333333", stroke_color="ffffff", stroke_width=1))

    output = output_dir / "canvas.png"
    image.save(output)
    print(f"🎨 画布 {image.width}x{image.height} 已保存: {output}")
    return output


def demo_transform(manager: ImageManager, source: Path) -> None:
    """变换与编码演示"""
    print("\n=== 变换与编码演示 ===")

    output_dir = get_output_dir("transform")
    with manager.read(source) as image:
        image.scale(120).rotate(90).greyscale()
        print(f"📐 变换后尺寸: {image.width}x{image.height}")

        for encoded in (image.to_jpeg(quality=70), image.to_png(indexed=True), image.to_gif()):
            path = encoded.save(output_dir / f"transformed.{encoded.extension}")
            print(f"💾 {encoded.format}: {encoded.get_size_human()} -> {path.name}")


def demo_animation(manager: ImageManager) -> None:
    """动画演示"""
    print("\n=== 动画演示 ===")

    output_dir = get_output_dir("animation")
    frames = []
    for color in ("ff0000", "00ff00", "0000ff"):
        frame = manager.create(64, 64).draw_rectangle(0, 0, 64, 64, background_color=color)
        frames.append((frame, 0.3))

    animation = manager.animate(frames, loops=0)
    encoded = animation.to_gif()
    path = encoded.save(output_dir / "colors.gif")
    print(f"🎞️ {len(animation)} 帧动画: {encoded.get_size_human()} -> {path.name}")

    still = animation.remove_animation("50%")
    print(f"🖼️ 取中间帧: {still.pick_color(0, 0)}")


def main():
    """主函数"""
    print("🖼️  图像处理演示")
    print("=" * 50)

    manager = ImageManager("pillow")
    try:
        canvas = demo_drawing(manager)
        demo_transform(manager, canvas)
        demo_animation(manager)

        print("\n✅ 所有演示完成！")

    except ImageError as e:
        print(f"\n❌ 演示过程中出现错误: {e.message}")
        raise


if __name__ == "__main__":
    main()
