# codeanalyzer/utils/dotnet_namespaces.py

"""
Well-known members of common .NET namespaces and static classes.

Without a semantic model the dead-code check cannot know which names a
`using System.Linq;` brings into scope. This table lists the names a C#
file typically writes when it relies on such a directive (types, and for
System.Linq the extension methods). It only ever makes an import count as
used, so a missing entry can at worst hide an unused directive.
"""

from typing import Dict, FrozenSet


def _names(text: str) -> FrozenSet[str]:
    return frozenset(text.split())


KNOWN_NAMESPACE_MEMBERS: Dict[str, FrozenSet[str]] = {
    "System": _names("""
        Action Activator AggregateException AppDomain ArgumentException ArgumentNullException
        ArgumentOutOfRangeException Array ArraySegment Attribute AttributeUsage BitConverter
        Boolean Buffer Byte Char Comparison Console Convert DateTime DateTimeOffset DayOfWeek
        DBNull Decimal Delegate DivideByZeroException Double Enum Environment EventArgs
        EventHandler Exception Flags FlagsAttribute FormatException Func GC Guid IAsyncDisposable
        ICloneable IComparable IConvertible IDisposable IEquatable IFormatProvider IFormattable
        IndexOutOfRangeException Int16 Int32 Int64 IntPtr InvalidCastException
        InvalidOperationException IProgress IServiceProvider Lazy Math MathF Memory
        NotImplementedException NotSupportedException Nullable NullReferenceException Object
        ObjectDisposedException Obsolete ObsoleteAttribute OperationCanceledException
        OverflowException Predicate Progress Random ReadOnlyMemory ReadOnlySpan SByte
        Serializable SerializableAttribute Single Span STAThread STAThreadAttribute String
        StringComparer StringComparison StringSplitOptions TimeoutException TimeSpan
        TimeZoneInfo Tuple Type TypeCode UInt16 UInt32 UInt64 UIntPtr UnauthorizedAccessException
        Uri UriKind ValueTuple Version WeakReference
    """),
    "System.Collections": _names("""
        ArrayList BitArray CollectionBase DictionaryEntry Hashtable ICollection IComparer
        IDictionary IDictionaryEnumerator IEnumerable IEnumerator IEqualityComparer IList
        Queue SortedList Stack
    """),
    "System.Collections.Generic": _names("""
        Comparer Dictionary EqualityComparer HashSet IAsyncEnumerable IAsyncEnumerator
        ICollection IComparer IDictionary IEnumerable IEnumerator IEqualityComparer IList
        IReadOnlyCollection IReadOnlyDictionary IReadOnlyList IReadOnlySet ISet
        KeyNotFoundException KeyValuePair LinkedList LinkedListNode List PriorityQueue Queue
        SortedDictionary SortedList SortedSet Stack
    """),
    "System.Collections.Concurrent": _names("""
        BlockingCollection ConcurrentBag ConcurrentDictionary ConcurrentQueue ConcurrentStack
        IProducerConsumerCollection Partitioner
    """),
    "System.Collections.ObjectModel": _names("""
        Collection KeyedCollection ObservableCollection ReadOnlyCollection ReadOnlyDictionary
        ReadOnlyObservableCollection
    """),
    "System.Linq": _names("""
        Aggregate All Any Append AsEnumerable AsQueryable Average Cast Chunk Concat Contains
        Count DefaultIfEmpty Distinct DistinctBy ElementAt ElementAtOrDefault Empty Enumerable
        Except ExceptBy First FirstOrDefault GroupBy GroupJoin IGrouping ILookup
        IOrderedEnumerable IOrderedQueryable IQueryable Intersect IntersectBy Join Last
        LastOrDefault LongCount Max MaxBy Min MinBy OfType OrderBy OrderByDescending Prepend
        Queryable Range Repeat Reverse Select SelectMany SequenceEqual Single SingleOrDefault
        Skip SkipLast SkipWhile Sum Take TakeLast TakeWhile ThenBy ThenByDescending ToArray
        ToDictionary ToHashSet ToList ToLookup Union UnionBy Where Zip
    """),
    "System.IO": _names("""
        BinaryReader BinaryWriter BufferedStream Directory DirectoryInfo DirectoryNotFoundException
        DriveInfo EndOfStreamException File FileAccess FileAttributes FileInfo FileMode
        FileNotFoundException FileShare FileStream FileSystemEventArgs FileSystemInfo
        FileSystemWatcher IOException MemoryStream Path PathTooLongException SearchOption
        SeekOrigin Stream StreamReader StreamWriter StringReader StringWriter TextReader
        TextWriter
    """),
    "System.Text": _names("""
        ASCIIEncoding Decoder Encoder Encoding NormalizationForm Rune StringBuilder
        UnicodeEncoding UTF8Encoding
    """),
    "System.Text.RegularExpressions": _names("""
        Capture CaptureCollection Group GroupCollection Match MatchCollection MatchEvaluator
        Regex RegexMatchTimeoutException RegexOptions
    """),
    "System.Text.Json": _names("""
        JsonDocument JsonElement JsonException JsonNamingPolicy JsonSerializer
        JsonSerializerOptions JsonValueKind Utf8JsonReader Utf8JsonWriter
    """),
    "System.Threading": _names("""
        AsyncLocal AutoResetEvent Barrier CancellationToken CancellationTokenRegistration
        CancellationTokenSource CountdownEvent Interlocked LazyThreadSafetyMode ManualResetEvent
        ManualResetEventSlim Monitor Mutex ReaderWriterLockSlim Semaphore SemaphoreSlim
        SpinLock SpinWait SynchronizationContext Thread ThreadLocal ThreadPool ThreadStart
        Timeout Timer Volatile WaitHandle
    """),
    "System.Threading.Tasks": _names("""
        Parallel ParallelOptions Task TaskCanceledException TaskCompletionSource
        TaskContinuationOptions TaskCreationOptions TaskFactory TaskScheduler TaskStatus
        ValueTask
    """),
    "System.Diagnostics": _names("""
        Conditional ConditionalAttribute Debug Debugger DebuggerBrowsable DebuggerDisplay
        DebuggerHidden DebuggerStepThrough EventLog FileVersionInfo Process ProcessStartInfo
        ProcessWindowStyle StackFrame StackTrace Stopwatch Trace
    """),
    "System.ComponentModel": _names("""
        BackgroundWorker Browsable CancelEventArgs CancelEventHandler Category Component
        DataErrorsChangedEventArgs DefaultValue Description DesignerProperties DisplayName
        EditorBrowsable EditorBrowsableState IContainer IDataErrorInfo INotifyDataErrorInfo
        INotifyPropertyChanged INotifyPropertyChanging PropertyChangedEventArgs
        PropertyChangedEventHandler TypeConverter Win32Exception
    """),
    "System.Globalization": _names("""
        CalendarWeekRule CompareInfo CultureInfo DateTimeStyles NumberFormatInfo NumberStyles
        RegionInfo TextInfo
    """),
    "System.Reflection": _names("""
        Assembly AssemblyName BindingFlags ConstructorInfo CustomAttributeExtensions FieldInfo
        GetCustomAttribute MemberInfo MethodBase MethodInfo ParameterInfo PropertyInfo
        TargetInvocationException
    """),
    "System.Runtime.CompilerServices": _names("""
        CallerArgumentExpression CallerFilePath CallerLineNumber CallerMemberName
        ConditionalWeakTable Extension InternalsVisibleTo MethodImpl MethodImplOptions
        RuntimeHelpers TaskAwaiter
    """),
    "System.Runtime.InteropServices": _names("""
        CallingConvention CharSet ComImport ComInterfaceType COMException ComVisible
        DllImport ExternalException FieldOffset GCHandle GCHandleType HandleRef In
        InterfaceType LayoutKind Marshal MarshalAs OSPlatform Out PreserveSig
        RuntimeInformation SafeHandle StructLayout UnmanagedType
    """),
    "System.Net.Http": _names("""
        ByteArrayContent FormUrlEncodedContent HttpClient HttpClientHandler HttpCompletionOption
        HttpContent HttpMethod HttpRequestException HttpRequestMessage HttpResponseMessage
        MultipartFormDataContent StreamContent StringContent
    """),
    "System.Windows": _names("""
        Application Clipboard CornerRadius DataTemplate DependencyObject DependencyProperty
        DependencyPropertyChangedEventArgs Duration FrameworkElement FrameworkPropertyMetadata
        GridLength HorizontalAlignment MessageBox MessageBoxButton MessageBoxImage
        MessageBoxResult Point PropertyMetadata Rect ResourceDictionary RoutedEventArgs
        RoutedEventHandler Size Style SystemParameters Thickness UIElement Vector
        VerticalAlignment Visibility Window WindowState
    """),
    "System.Windows.Controls": _names("""
        Border Button Canvas CheckBox ComboBox ContentControl ContextMenu Control DataGrid
        Dock DockPanel Grid Image InkCanvas InkCanvasEditingMode ItemsControl Label ListBox
        ListView MenuItem Orientation Page Panel ProgressBar RadioButton ScrollViewer Slider
        StackPanel TextBlock TextBox ToolTip UserControl Viewbox WrapPanel
    """),
    "System.Windows.Input": _names("""
        CommandManager Cursor Cursors ICommand InputEventArgs Key KeyEventArgs KeyGesture
        Keyboard ManipulationCompletedEventArgs ManipulationDeltaEventArgs
        ManipulationStartingEventArgs ModifierKeys Mouse MouseButton MouseButtonEventArgs
        MouseButtonState MouseEventArgs MouseWheelEventArgs RoutedCommand StylusDevice
        StylusEventArgs StylusPoint StylusPointCollection Tablet TouchDevice TouchEventArgs
    """),
    "System.Windows.Media": _names("""
        BitmapScalingMode Brush Brushes Color ColorConverter Colors CompositionTarget
        DoubleCollection DrawingContext DrawingVisual EllipseGeometry FontFamily FormattedText
        Geometry GeometryGroup ImageSource LineGeometry Matrix MatrixTransform PathGeometry
        Pen PenLineCap PointCollection RectangleGeometry RenderOptions RotateTransform
        ScaleTransform SolidColorBrush StreamGeometry Transform TranslateTransform Typeface
        Visual VisualTreeHelper
    """),
    "System.Windows.Ink": _names("""
        ApplicationGesture DrawingAttributes EllipseStylusShape GestureRecognizer
        RectangleStylusShape Stroke StrokeCollection StrokeCollectionChangedEventArgs
        StylusShape StylusTip
    """),
    # targets of `using static`
    "System.Math": _names("""
        Abs Acos Asin Atan Atan2 Ceiling Clamp Cos E Exp Floor Log Log10 Max Min PI Pow
        Round Sign Sin Sqrt Tan Truncate
    """),
    "System.Console": _names("""
        Beep Clear ForegroundColor BackgroundColor Read ReadKey ReadLine ResetColor Write
        WriteLine
    """),
}


def known_members(namespace: str) -> FrozenSet[str]:
    """Names brought into scope by `namespace`, or an empty set if it is not tabled."""
    return KNOWN_NAMESPACE_MEMBERS.get(namespace, frozenset())
